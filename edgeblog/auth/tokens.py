# edgeblog/auth/tokens.py
from datetime import datetime, timedelta

import jwt
from flask import current_app

from edgeblog.errors import InternalConfigError, Unauthorized


def _secret():
    secret = current_app.config.get("JWT_SECRET_KEY")
    if not secret:
        current_app.logger.error("JWT_SECRET_KEY is not configured")
        raise InternalConfigError("Server configuration error: Authentication secret is missing.")
    return secret


def issue_token(user, expires_in=None):
    """Firma un JWT con id, rol y nombre del usuario."""
    if expires_in is None:
        expires_in = current_app.config.get("JWT_EXPIRES_IN", 3600)

    now = datetime.utcnow()
    payload = {
        "sub": str(user.id),
        "role": user.role,
        "name": user.name,
        "iat": now,
        "exp": now + timedelta(seconds=expires_in),
    }
    return jwt.encode(payload, _secret(), algorithm=current_app.config.get("JWT_ALGORITHM", "HS256"))


def decode_token(token):
    """Devuelve la identidad {"id", "role", "name"} o lanza Unauthorized."""
    secret = _secret()
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[current_app.config.get("JWT_ALGORITHM", "HS256")],
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        raise Unauthorized("Authentication token has expired.")
    except jwt.InvalidTokenError as e:
        current_app.logger.info("Rejected token: %s", e)
        raise Unauthorized("Authentication token is invalid.")

    if not str(payload["sub"]).isdigit():
        raise Unauthorized("Authentication token is invalid.")

    return {
        "id": int(payload["sub"]),
        "role": payload.get("role"),
        "name": payload.get("name"),
    }
