from biolink.extensions import db
from .base import BaseModel

class Media(BaseModel):
    __tablename__ = "media"

    # Uploader; only they may reference or delete the file
    user_id = db.Column(db.String(36), db.ForeignKey("users.id"), nullable=False, index=True)
    filename = db.Column(db.String(64), unique=True, nullable=False)
