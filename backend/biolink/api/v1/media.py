from flask import g, request, jsonify
from biolink.utils.decorators import user_required
from biolink.utils.media import save_file
from . import v1_bp


@v1_bp.route("/media", methods=["POST"])
@user_required
def upload_media():
    if "file" not in request.files:
        return jsonify({"error": "No file provided"}), 400

    try:
        url = save_file(request.files["file"], owner_id=g.current_user.id)
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400

    return jsonify({"url": url}), 201
