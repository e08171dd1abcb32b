from datetime import datetime

from edgeblog.extensions import db

ROLES = ("admin", "user", "moderator")


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(150), nullable=False)
    email = db.Column(db.String(120), nullable=False, unique=True)
    password_hash = db.Column(db.String(255), nullable=False)

    role = db.Column(db.String(20), nullable=False, default="admin")  # 'admin', 'user' o 'moderator'
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    avatar = db.Column(db.String, nullable=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        db.CheckConstraint("role IN ('admin', 'user', 'moderator')", name="ck_users_role"),
    )

    # ✅ Proyección pública: nunca incluye el hash de la contraseña
    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role,
            "isActive": self.is_active,
            "avatar": self.avatar,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }

    def to_author(self):
        return {"id": self.id, "name": self.name, "email": self.email}

    def __repr__(self):
        return f"<User {self.email}>"
