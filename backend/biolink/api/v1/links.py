from flask import g, request, jsonify
from biolink.application.links.manage_links import add_link, update_link, remove_link
from biolink.application.pages.queries import list_page_links
from biolink.normalizers.link import normalize_link
from biolink.utils.decorators import user_required
from . import v1_bp


@v1_bp.route("/pages/<page_id>/links", methods=["GET"])
def get_links(page_id):
    return jsonify([normalize_link(link) for link in list_page_links(page_id)]), 200


@v1_bp.route("/pages/<page_id>/links", methods=["POST"])
@user_required
def create_link(page_id):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid request body"}), 400

    link = add_link(
        page_id=page_id,
        owner_id=g.current_user.id,
        title=data.get("title"),
        url=data.get("url"),
        image_url=data.get("image_url"),
    )

    return jsonify(normalize_link(link, admin=True)), 201


@v1_bp.route("/links/<link_id>", methods=["PUT"])
@user_required
def edit_link(link_id):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid request body"}), 400

    link = update_link(link_id=link_id, owner_id=g.current_user.id, data=data)
    return jsonify(normalize_link(link, admin=True)), 200


@v1_bp.route("/links/<link_id>", methods=["DELETE"])
@user_required
def delete_link(link_id):
    remove_link(link_id=link_id, owner_id=g.current_user.id)
    return jsonify({"message": "Link removed successfully"}), 200
