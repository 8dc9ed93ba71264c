from functools import wraps
from flask import g, jsonify
from flask_jwt_extended import get_jwt_identity, verify_jwt_in_request
from biolink.extensions import db
from biolink.models.user import User

def user_required(fn):
    """
    Require a valid access token for an active user.

    The user is attached to g.current_user; views pass its id to the
    services explicitly.
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        verify_jwt_in_request()

        user = db.session.get(User, get_jwt_identity())
        if not user:
            return jsonify({"error": "Unknown user"}), 401

        if not user.is_active:
            return jsonify({"error": "User account disabled"}), 403

        g.current_user = user
        return fn(*args, **kwargs)
    return wrapper
