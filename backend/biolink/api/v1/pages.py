from flask import g, request, jsonify
from biolink.application.pages.create_page import create_page as create_page_service
from biolink.application.pages.update_page import update_page as update_page_service
from biolink.application.pages.delete_page import delete_page as delete_page_service
from biolink.application.pages.queries import get_public_page, list_user_pages
from biolink.normalizers.page import normalize_page
from biolink.utils.decorators import user_required
from . import v1_bp


@v1_bp.route("/pages", methods=["GET"])
@user_required
def list_pages():
    pages = list_user_pages(g.current_user.id)
    return jsonify([normalize_page(p, admin=True) for p in pages]), 200


@v1_bp.route("/pages", methods=["POST"])
@user_required
def create_page():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid request body"}), 400

    page = create_page_service(
        title=data.get("title"),
        description=data.get("description"),
        owner_id=g.current_user.id,
    )

    return jsonify(normalize_page(page, admin=True)), 201


@v1_bp.route("/pages/<slug>", methods=["GET"])
def get_page(slug):
    view = get_public_page(slug)

    return jsonify(
        normalize_page(
            view["page"],
            links=view["links"],
            avatar_url=view["avatar_url"],
        )
    ), 200


@v1_bp.route("/pages/<page_id>", methods=["PUT"])
@user_required
def update_page(page_id):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid request body"}), 400

    page = update_page_service(
        page_id=page_id,
        owner_id=g.current_user.id,
        data=data,
    )

    return jsonify(normalize_page(page, admin=True)), 200


@v1_bp.route("/pages/<page_id>", methods=["DELETE"])
@user_required
def delete_page(page_id):
    delete_page_service(page_id=page_id, owner_id=g.current_user.id)
    return jsonify({"message": "Page deleted successfully"}), 200
