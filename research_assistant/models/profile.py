from ..extensions import db
from .base import TimestampMixin, new_id


class Profile(db.Model, TimestampMixin):
    __tablename__ = "profiles"
    id = db.Column(db.String(36), primary_key=True, default=new_id)
    # one profile per identity
    user_id = db.Column(db.String(36), db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True)
    full_name = db.Column(db.String(255))
    company = db.Column(db.String(255))
    role = db.Column(db.String(255))

    user = db.relationship("User", back_populates="profile")
