from flask import request, jsonify, current_app
from flask_jwt_extended import create_access_token
from sqlalchemy.exc import IntegrityError
from biolink.extensions import db
from biolink.models.user import User
from . import v1_bp


def _credentials():
    data = request.get_json(silent=True)
    if not data:
        return None, None

    email = (data.get("email") or "").strip().lower()
    password = data.get("password")
    return email, password


@v1_bp.route("/auth/register", methods=["POST"])
def register():
    email, password = _credentials()

    if not email or not password:
        return jsonify({"error": "Email and password required"}), 400

    if User.query.filter_by(email=email).first():
        return jsonify({"error": "Email already registered"}), 409

    user = User()
    user.email = email
    user.set_password(password)

    try:
        db.session.add(user)
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        return jsonify({"error": "Email already registered"}), 409

    current_app.logger.info("Registered user %s", user.id)

    return jsonify({
        "id": user.id,
        "email": user.email
    }), 201


@v1_bp.route("/auth/login", methods=["POST"])
def login():
    email, password = _credentials()

    if not email or not password:
        return jsonify({"error": "Email and password required"}), 400

    user = User.query.filter_by(email=email).first()

    if not user or not user.check_password(password):
        return jsonify({"error": "Invalid credentials"}), 401

    if not user.is_active:
        return jsonify({"error": "User account disabled"}), 403

    access_token = create_access_token(identity=user.id)

    return jsonify({
        "access_token": access_token,
        "user_id": user.id
    }), 200
