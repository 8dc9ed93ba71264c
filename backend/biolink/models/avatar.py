from biolink.extensions import db
from .base import BaseModel

class Avatar(BaseModel):
    __tablename__ = "avatars"

    user_id = db.Column(db.String(36), db.ForeignKey("users.id"), unique=True, nullable=False, index=True)
    image_url = db.Column(db.String(512), nullable=False)
