def normalize_link(link, admin=False):
    base = {
        "id": link.id,
        "title": link.title,
        "url": link.url,
        "image_url": link.image_url,
    }

    if admin:
        base["page_id"] = link.page_id
        base["created_at"] = link.created_at.isoformat() if link.created_at else None
        base["updated_at"] = link.updated_at.isoformat() if link.updated_at else None

    return base
