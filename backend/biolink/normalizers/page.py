from .link import normalize_link

def normalize_page(page, admin=False, links=None, avatar_url=None):
    data = {
        "id": page.id,
        "slug": page.slug,
        "title": page.title,
        "description": page.description or "",
    }

    if admin:
        data["user_id"] = page.user_id
        data["created_at"] = page.created_at.isoformat() if page.created_at else None
        data["updated_at"] = page.updated_at.isoformat() if page.updated_at else None

    if links is not None:
        data["links"] = [normalize_link(link, admin=admin) for link in links]
        data["avatar_url"] = avatar_url

    return data
