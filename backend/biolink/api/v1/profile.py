from flask import g, request, jsonify, current_app
from sqlalchemy.exc import IntegrityError
from biolink.extensions import db
from biolink.models.user import User
from biolink.application.profile.avatar import get_avatar_url, set_avatar
from biolink.utils.decorators import user_required
from . import v1_bp


@v1_bp.route("/profile/avatar", methods=["GET"])
@user_required
def get_avatar():
    return jsonify({"avatar_url": get_avatar_url(g.current_user.id)}), 200


@v1_bp.route("/profile/avatar", methods=["PUT"])
@user_required
def put_avatar():
    data = request.get_json(silent=True) or {}
    image_url = data.get("image_url")

    if not image_url:
        return jsonify({"error": "image_url is required"}), 400

    avatar = set_avatar(user_id=g.current_user.id, image_url=image_url)
    return jsonify({"avatar_url": avatar.image_url}), 200


@v1_bp.route("/profile/email", methods=["PUT"])
@user_required
def change_email():
    data = request.get_json(silent=True) or {}
    email = data.get("email")

    if not isinstance(email, str) or "@" not in email.strip():
        return jsonify({"error": "A valid email is required"}), 400

    email = email.strip().lower()
    user = g.current_user

    if email == user.email:
        return jsonify({"id": user.id, "email": user.email}), 200

    if User.query.filter_by(email=email).first():
        return jsonify({"error": "Email already registered"}), 409

    user.email = email
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        return jsonify({"error": "Email already registered"}), 409

    current_app.logger.info("User %s changed their email", user.id)

    return jsonify({"id": user.id, "email": user.email}), 200
