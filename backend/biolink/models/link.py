from biolink.extensions import db
from .base import BaseModel

class Link(BaseModel):
    __tablename__ = "links"

    page_id = db.Column(db.String(36), db.ForeignKey("pages.id"), nullable=False, index=True)
    title = db.Column(db.String(200), nullable=False)
    url = db.Column(db.String(2048), nullable=False)
    image_url = db.Column(db.String(512), nullable=True)

    page = db.relationship("Page", back_populates="links")
