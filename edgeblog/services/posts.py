# edgeblog/services/posts.py
"""
Flujo de creación, borrado y likes de posts.

create_post() valida todo antes de subir la imagen; si el guardado en la
base de datos falla después de la subida, la imagen se borra del blob
store para no dejar huérfanos.
"""
import logging
import time

from flask import current_app
from sqlalchemy import or_, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from edgeblog.errors import Conflict, NotFound, Unauthorized, UpstreamFailure, ValidationError
from edgeblog.extensions import db
from edgeblog.models import CATEGORIES, Post, User, post_likes
from edgeblog.models.details import JobDetails, ScholarshipDetails, parse_category_details, parse_string_list
from edgeblog.utils.identifiers import parse_id
from edgeblog.utils.slugs import generate_slug

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "body", "category", "author")
ALLOWED_EXTENSIONS = ("jpeg", "jpg", "png", "gif", "webp")


def _field(fields, name):
    value = fields.get(name)
    if isinstance(value, str):
        return value.strip()
    return value


def _blob_store(blob_store):
    if blob_store is not None:
        return blob_store
    return current_app.extensions["blob_store"]


def read_image(image):
    """Valida la imagen subida y devuelve (bytes, extensión)."""
    filename = (image.filename or "").lower()
    extension = filename.rsplit(".", 1)[-1] if "." in filename else ""
    if extension not in ALLOWED_EXTENSIONS:
        raise ValidationError(f"Images only ({', '.join(ALLOWED_EXTENSIONS)}).")

    mimetype = image.mimetype or ""
    if mimetype and not mimetype.startswith("image/"):
        raise ValidationError(f"Images only ({', '.join(ALLOWED_EXTENSIONS)}).")

    data = image.read()
    if not data:
        raise ValidationError("Uploaded image is empty.")

    max_size = current_app.config.get("MAX_IMAGE_SIZE", 10 * 1024 * 1024)
    if len(data) > max_size:
        raise ValidationError(f"Image cannot exceed {max_size // 1024} KB.")
    return data, extension


def blob_key(slug, extension):
    return f"{slug}-{int(time.time() * 1000)}.{extension}"


def find_duplicate(slug, title):
    return Post.query.filter(or_(Post.slug == slug, Post.title == title)).first()


def discard_blob(blob_store, key):
    """Borrado compensatorio: los fallos se registran, nunca se propagan."""
    try:
        blob_store.delete(key)
    except Exception:
        logger.exception("Failed to delete blob %s; needs manual cleanup", key)
    else:
        logger.info("Deleted blob %s", key)


def create_post(fields, image=None, blob_store=None):
    # 1. Campos obligatorios
    missing = [name for name in REQUIRED_FIELDS if not _field(fields, name)]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}.")

    # los bodies JSON pueden traer cualquier tipo
    for name in ("title", "body", "category"):
        if not isinstance(fields.get(name), str):
            raise ValidationError(f"Field '{name}' must be a string.")

    title = _field(fields, "title")
    body = fields.get("body")
    category = _field(fields, "category").lower()

    # 2. Autor con formato válido (no se comprueba que exista)
    author_id = parse_id(_field(fields, "author"), "author ID format")

    if category not in CATEGORIES:
        raise ValidationError(f"Invalid category '{category}'. Allowed: {', '.join(CATEGORIES)}.")

    # 3. Detalles por categoría, tags e imagen: todo validado antes de subir nada
    details = parse_category_details(category, fields)
    tags = parse_string_list(fields.get("tags"), "tags")
    image_data = None
    if image is not None and image.filename:
        image_data, extension = read_image(image)

    slug = generate_slug(title)
    if not slug:
        raise ValidationError("Title must contain at least one letter or number.")

    # 4. Duplicados antes de la subida
    if find_duplicate(slug, title):
        raise Conflict("A post with this title or slug already exists. Please use a different title.")

    # 5. Subida opcional de la imagen
    blob_store = _blob_store(blob_store)
    stored = None
    if image_data is not None:
        stored = blob_store.put(blob_key(slug, extension), image_data)

    post = Post(
        title=title,
        slug=slug,
        body=body,
        category=category,
        author_id=author_id,
        image_path=stored.url if stored else None,
        image_key=stored.key if stored else None,
        tags=tags,
        scholarship_details=details.to_dict() if isinstance(details, ScholarshipDetails) else None,
        job_details=details.to_dict() if isinstance(details, JobDetails) else None,
    )

    # 6. Guardado con compensación
    try:
        db.session.add(post)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Error creating blog post %r: %s", slug, e)
        if stored is not None:
            discard_blob(blob_store, stored.key)

        if isinstance(e, IntegrityError) and find_duplicate(slug, title):
            raise Conflict("A post with this title or slug already exists. Please use a different title.")
        raise UpstreamFailure(
            "Server error occurred while creating the post. Please try again later."
        ) from e

    logger.info("Created post %s (%s)", post.id, post.slug)
    return post


def list_posts(category=None):
    query = Post.query
    if category:
        category = category.strip().lower()
        if category not in CATEGORIES:
            raise ValidationError(f"Invalid category '{category}'. Allowed: {', '.join(CATEGORIES)}.")
        query = query.filter_by(category=category)
    return query.order_by(Post.created_at.desc(), Post.id.desc()).all()


def get_post(post_id):
    post = db.session.get(Post, parse_id(post_id, "Post ID"))
    if post is None:
        raise NotFound("Post not found.")
    return post


def delete_post(post_id, user_id, blob_store=None):
    post = get_post(post_id)
    if post.author_id != user_id:
        raise Unauthorized("User not authorized to delete this post.")

    image_key = post.image_key
    try:
        db.session.delete(post)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Error deleting post %s: %s", post_id, e)
        raise UpstreamFailure("Server error occurred while deleting the post.") from e

    # 🔹 La imagen se borra después: si falla, el post ya no existe
    if image_key:
        discard_blob(_blob_store(blob_store), image_key)
    logger.info("Deleted post %s", post_id)


def toggle_like(model, association, column, counter, object_id, user_id):
    """Añade o quita el like del usuario y ajusta el contador con un UPDATE atómico."""
    user = db.session.get(User, user_id)
    if user is None:
        raise NotFound("User not found.")

    condition = (association.c[column] == object_id) & (association.c.user_id == user_id)
    already_liked = db.session.execute(
        select(association.c.user_id).where(condition)
    ).first() is not None

    try:
        if already_liked:
            db.session.execute(association.delete().where(condition))
            delta, action = -1, "unliked"
        else:
            db.session.execute(association.insert().values({column: object_id, "user_id": user_id}))
            delta, action = 1, "liked"
        db.session.execute(
            update(model)
            .where(model.id == object_id)
            .values({counter: getattr(model, counter) + delta})
        )
        db.session.commit()
    except IntegrityError:
        # doble click concurrente: el like ya existía
        db.session.rollback()
        action = "liked"
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Error toggling like on %s %s: %s", model.__tablename__, object_id, e)
        raise UpstreamFailure("Server error occurred while updating likes.") from e

    like_count = db.session.execute(
        select(getattr(model, counter)).where(model.id == object_id)
    ).scalar_one()
    return {"action": action, "likeCount": like_count}


def toggle_post_like(post_id, user_id):
    post = get_post(post_id)
    return toggle_like(Post, post_likes, "post_id", "like_count", post.id, user_id)
