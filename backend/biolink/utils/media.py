import os
import uuid
from werkzeug.utils import secure_filename
from flask import current_app
from biolink.extensions import db
from biolink.models.avatar import Avatar
from biolink.models.link import Link
from biolink.models.media import Media
from biolink.utils.transaction import transactional

ALLOWED_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif', 'webp'}
MEDIA_URL_PREFIX = "/media/"

def allowed_file(filename):
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in ALLOWED_EXTENSIONS

def _media_filename(file_url):
    if not isinstance(file_url, str) or not file_url.startswith(MEDIA_URL_PREFIX):
        return None
    return secure_filename(file_url[len(MEDIA_URL_PREFIX):]) or None

def _find_media(filename):
    return db.session.execute(
        db.select(Media).filter_by(filename=filename)
    ).scalar_one_or_none()

def save_file(file, *, owner_id):
    if not file.filename or not allowed_file(file.filename):
        raise ValueError("File type not allowed")

    filename = secure_filename(file.filename)
    ext = filename.rsplit('.', 1)[1].lower()
    unique_filename = f"{uuid.uuid4().hex}.{ext}"

    upload_folder = current_app.config['UPLOAD_FOLDER']
    os.makedirs(upload_folder, exist_ok=True)
    file.save(os.path.join(upload_folder, unique_filename))

    media = Media()
    media.user_id = owner_id
    media.filename = unique_filename

    try:
        with transactional():
            db.session.add(media)
    except Exception:
        os.remove(os.path.join(upload_folder, unique_filename))
        raise

    # Served by the public /media/<filename> route
    return f"{MEDIA_URL_PREFIX}{unique_filename}"


def may_use_media(file_url, user_id):
    """
    Whether user_id may attach file_url to their content.

    External URLs are always allowed; /media/ URLs only when the user
    uploaded the file.
    """
    if file_url is None or not str(file_url).startswith(MEDIA_URL_PREFIX):
        return True

    filename = _media_filename(file_url)
    media = _find_media(filename) if filename else None
    return media is not None and media.user_id == user_id


def _still_referenced(file_url):
    in_links = db.session.execute(
        db.select(Link.id).filter_by(image_url=file_url).limit(1)
    ).first()
    in_avatars = db.session.execute(
        db.select(Avatar.id).filter_by(image_url=file_url).limit(1)
    ).first()
    return in_links is not None or in_avatars is not None


def delete_file(file_url, *, owner_id):
    """
    Deletes a stored upload given its /media/ URL.

    Only the uploader's files are removed, and only once no link or
    avatar points at them any more. Call after the referencing row is
    committed away.
    """
    filename = _media_filename(file_url)
    if not filename:
        return False

    media = _find_media(filename)
    if media is None or media.user_id != owner_id:
        return False

    if _still_referenced(file_url):
        return False

    file_path = os.path.join(current_app.config['UPLOAD_FOLDER'], filename)

    with transactional():
        db.session.delete(media)

    if os.path.exists(file_path):
        try:
            os.remove(file_path)
            return True
        except OSError as e:
            current_app.logger.error(f"Failed to delete file {file_path}: {e}")
            return False
    return False
