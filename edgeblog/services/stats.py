# edgeblog/services/stats.py
from sqlalchemy import func, select

from edgeblog.extensions import db
from edgeblog.models import Post, User

TOP_POSTS_LIMIT = 5


def _grouped_counts(column):
    rows = db.session.execute(select(column, func.count()).group_by(column)).all()
    return {key: count for key, count in rows}


def dashboard():
    users = User.query.order_by(User.created_at.desc(), User.id.desc()).all()
    return {
        "totalPosts": db.session.execute(select(func.count(Post.id))).scalar_one(),
        "postsByCategory": _grouped_counts(Post.category),
        "users": [
            {
                "id": user.id,
                "name": user.name,
                "email": user.email,
                "role": user.role,
                "createdAt": user.created_at.isoformat() if user.created_at else None,
            }
            for user in users
        ],
    }


def _top_posts(counter, key):
    posts = (
        Post.query.order_by(counter.desc(), Post.created_at.desc())
        .limit(TOP_POSTS_LIMIT)
        .all()
    )
    return [{"id": post.id, "title": post.title, key: getattr(post, counter.key)} for post in posts]


def metrics():
    return {
        "usersByRole": _grouped_counts(User.role),
        "topPostsByLikes": _top_posts(Post.like_count, "likeCount"),
        "topPostsByComments": _top_posts(Post.comment_count, "commentCount"),
    }
