from biolink.extensions import db
from .base import BaseModel

class Page(BaseModel):
    __tablename__ = 'pages'

    user_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False, index=True)
    title = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=True)

    # Global across all users
    __table_args__ = (
        db.UniqueConstraint("slug", name="uq_page_slug"),
    )

    # Links in display order, removed with the page
    links = db.relationship(
        "Link",
        back_populates="page",
        order_by="Link.created_at",
        cascade="all, delete-orphan"
    )
