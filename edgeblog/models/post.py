from datetime import datetime

from edgeblog.extensions import db

post_likes = db.Table(
    "post_likes",
    db.Column("post_id", db.Integer, db.ForeignKey("posts.id", ondelete="CASCADE"), primary_key=True),
    db.Column("user_id", db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
)


# edgeblog/models/post.py
class Post(db.Model):
    __tablename__ = "posts"

    id = db.Column(db.Integer, primary_key=True)

    # 🧠 Contenido principal
    title = db.Column(db.String(255), nullable=False, unique=True)
    slug = db.Column(db.String(255), nullable=False, unique=True)
    body = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(20), nullable=False, index=True)
    tags = db.Column(db.JSON, nullable=False, default=list)

    # 👤 Autor
    author_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    author = db.relationship("User", lazy="joined")

    # 🖼️ Imagen (URL pública + clave en el blob store para poder borrarla)
    image_path = db.Column(db.String, nullable=True)
    image_key = db.Column(db.String, nullable=True)

    # ❤️ Likes y contadores desnormalizados
    likes = db.relationship("User", secondary=post_likes)
    like_count = db.Column(db.Integer, nullable=False, default=0)
    comment_count = db.Column(db.Integer, nullable=False, default=0)

    # 🎓 / 💼 Detalles por categoría (solo uno de los dos)
    scholarship_details = db.Column(db.JSON(none_as_null=True), nullable=True)
    job_details = db.Column(db.JSON(none_as_null=True), nullable=True)

    comments = db.relationship(
        "Comment",
        back_populates="post",
        cascade="all, delete-orphan",
    )

    # ⏰ Timestamps
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        db.CheckConstraint(
            "scholarship_details IS NULL OR job_details IS NULL",
            name="ck_posts_single_details",
        ),
    )

    def to_dict(self):
        data = {
            "id": self.id,
            "title": self.title,
            "slug": self.slug,
            "body": self.body,
            "category": self.category,
            "author": self.author.to_author() if self.author else self.author_id,
            "image_path": self.image_path,
            "tags": list(self.tags or []),
            "likeCount": self.like_count,
            "commentCount": self.comment_count,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
        if self.scholarship_details is not None:
            data["scholarshipDetails"] = self.scholarship_details
        if self.job_details is not None:
            data["jobDetails"] = self.job_details
        return data

    def __repr__(self):
        return f"<Post {self.title}>"
