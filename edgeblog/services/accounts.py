# edgeblog/services/accounts.py
import logging

from sqlalchemy.exc import IntegrityError
from werkzeug.security import check_password_hash, generate_password_hash

from edgeblog.auth.tokens import issue_token
from edgeblog.errors import Conflict, InvalidCredentials, ValidationError
from edgeblog.extensions import db
from edgeblog.models import User

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6
DEFAULT_ROLE = "admin"


def _normalize_email(email):
    return (email or "").strip().lower()


def find_user_by_email(email):
    return User.query.filter_by(email=email).first()


def register(name, email, password):
    name = (name or "").strip()
    email = _normalize_email(email)
    if not name or not email or not password:
        raise ValidationError("Please enter all fields: name, email, and password.")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long.")

    if find_user_by_email(email):
        raise Conflict("A user with this email already exists.")

    user = User(
        name=name,
        email=email,
        password_hash=generate_password_hash(password),
        role=DEFAULT_ROLE,
    )
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        # otro registro con el mismo email ganó la carrera
        db.session.rollback()
        raise Conflict("A user with this email already exists.")

    logger.info("Registered user %s", user.id)
    return user


def authenticate(email, password):
    """Mismo error si el usuario no existe o la contraseña no coincide."""
    email = _normalize_email(email)
    if not email or not password:
        raise ValidationError("Please enter both email and password.")

    user = find_user_by_email(email)
    if user is None or not check_password_hash(user.password_hash, password):
        logger.info("Failed login attempt")
        raise InvalidCredentials("Invalid credentials.")
    return user


def login(email, password):
    user = authenticate(email, password)
    return issue_token(user), user
