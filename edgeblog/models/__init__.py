# edgeblog/models/__init__.py
"""
Paquete de modelos de la aplicación.
Importa aquí los modelos para que puedan ser referenciados como:
from edgeblog.models import Post
"""
from .user import User, ROLES
from .post import Post, post_likes
from .comment import Comment, comment_likes, MAX_COMMENT_LENGTH
from .details import CATEGORIES, JOB_TYPES, ScholarshipDetails, JobDetails

__all__ = [
    "User",
    "ROLES",
    "Post",
    "post_likes",
    "Comment",
    "comment_likes",
    "MAX_COMMENT_LENGTH",
    "CATEGORIES",
    "JOB_TYPES",
    "ScholarshipDetails",
    "JobDetails",
]
