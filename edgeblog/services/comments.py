# edgeblog/services/comments.py
import logging
from collections import namedtuple

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError

from edgeblog.errors import NotFound, UpstreamFailure, ValidationError
from edgeblog.extensions import db
from edgeblog.models import MAX_COMMENT_LENGTH, Comment, Post, comment_likes
from edgeblog.services.posts import get_post, toggle_like
from edgeblog.utils.identifiers import parse_id

logger = logging.getLogger(__name__)

RegisteredAuthor = namedtuple("RegisteredAuthor", ["id"])
AnonymousAuthor = namedtuple("AnonymousAuthor", ["full_name", "email"])


def resolve_author(author_id=None, author_info=None):
    """Devuelve RegisteredAuthor o AnonymousAuthor; el id registrado tiene prioridad."""
    if author_id not in (None, ""):
        return RegisteredAuthor(parse_id(author_id, "author ID"))

    if isinstance(author_info, dict):
        full_name = str(author_info.get("fullName") or "").strip() or None
        email = str(author_info.get("email") or "").strip().lower() or None
        if full_name or email:
            return AnonymousAuthor(full_name, email)

    raise ValidationError("Either authorId or author_info (with a name/email) is required.")


def add_comment(post_id, content, author_id=None, author_info=None, parent_id=None):
    content = (content or "").strip() if isinstance(content, str) else ""
    if not content:
        raise ValidationError("Comment content is required.")
    if len(content) > MAX_COMMENT_LENGTH:
        raise ValidationError(f"Comment cannot exceed {MAX_COMMENT_LENGTH} characters.")

    author = resolve_author(author_id, author_info)
    post = get_post(post_id)

    parent = None
    if parent_id not in (None, ""):
        parent = db.session.get(Comment, parse_id(parent_id, "parent comment ID"))
        if parent is None or parent.post_id != post.id:
            raise NotFound("Parent comment not found on this post.")

    comment = Comment(content=content, post_id=post.id, parent=parent)
    if isinstance(author, RegisteredAuthor):
        comment.author_id = author.id
    else:
        comment.author_name = author.full_name
        comment.author_email = author.email

    try:
        db.session.add(comment)
        # 🔢 Incremento atómico del contador en la misma transacción
        db.session.execute(
            update(Post)
            .where(Post.id == post.id)
            .values(comment_count=Post.comment_count + 1)
        )
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Error adding comment to post %s: %s", post.id, e)
        raise UpstreamFailure("Server error occurred while adding the comment.") from e

    return comment


def list_comments(post_id):
    """Comentarios de primer nivel (más nuevos primero) con sus respuestas anidadas."""
    post_id = parse_id(post_id, "Post ID")
    comments = (
        Comment.query.filter_by(post_id=post_id, parent_id=None)
        .order_by(Comment.created_at.desc(), Comment.id.desc())
        .all()
    )
    if not comments:
        raise NotFound("No comments found for this post.")
    return comments


def toggle_comment_like(comment_id, user_id):
    comment = db.session.get(Comment, parse_id(comment_id, "Comment ID"))
    if comment is None:
        raise NotFound("Comment not found.")
    return toggle_like(Comment, comment_likes, "comment_id", "like_count", comment.id, user_id)
