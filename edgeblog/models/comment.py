from datetime import datetime

from edgeblog.extensions import db

MAX_COMMENT_LENGTH = 500

comment_likes = db.Table(
    "comment_likes",
    db.Column("comment_id", db.Integer, db.ForeignKey("comments.id", ondelete="CASCADE"), primary_key=True),
    db.Column("user_id", db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
)


class Comment(db.Model):
    """
    Comentario de un post.

    El autor es un usuario registrado (author_id) o un anónimo con
    nombre/email (author_name, author_email), nunca ambos.
    """

    __tablename__ = "comments"

    id = db.Column(db.Integer, primary_key=True)
    content = db.Column(db.String(MAX_COMMENT_LENGTH), nullable=False)

    author_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=True)
    author = db.relationship("User", lazy="joined")
    author_name = db.Column(db.String(150), nullable=True)
    author_email = db.Column(db.String(120), nullable=True)

    post_id = db.Column(db.Integer, db.ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True)
    post = db.relationship("Post", back_populates="comments")

    # 💬 Respuestas: comentarios independientes que apuntan a su padre
    parent_id = db.Column(db.Integer, db.ForeignKey("comments.id", ondelete="CASCADE"), nullable=True)
    replies = db.relationship(
        "Comment",
        order_by="Comment.created_at",
        cascade="all, delete-orphan",
        backref=db.backref("parent", remote_side=[id]),
    )

    likes = db.relationship("User", secondary=comment_likes)
    like_count = db.Column(db.Integer, nullable=False, default=0)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        db.CheckConstraint(
            "(author_id IS NOT NULL AND author_name IS NULL AND author_email IS NULL) OR "
            "(author_id IS NULL AND (author_name IS NOT NULL OR author_email IS NOT NULL))",
            name="ck_comments_single_author",
        ),
    )

    @property
    def author_info(self):
        if self.author_id is not None:
            return None
        return {"fullName": self.author_name, "email": self.author_email}

    def to_dict(self, nested=False):
        return {
            "id": self.id,
            "content": self.content,
            "post": self.post_id,
            "author": self.author.to_author() if self.author else None,
            "author_info": self.author_info,
            "likeCount": self.like_count,
            "replies": [
                reply.to_dict(nested=True) if nested else reply.id
                for reply in self.replies
            ],
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<Comment {self.id} on post {self.post_id}>"
