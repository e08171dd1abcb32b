# edgeblog/routes/post_routes.py
from flask import Blueprint, current_app, g, jsonify, request

from edgeblog.auth.decorators import token_required
from edgeblog.services import posts

post_bp = Blueprint("posts", __name__)


def _post_fields():
    # multipart/form-data (con imagen) o JSON
    if request.form:
        return request.form
    return request.get_json(silent=True) or {}


# 🟢 Crear un nuevo post
@post_bp.route("/add-posts", methods=["POST"])
@token_required
def create_post():
    post = posts.create_post(
        _post_fields(),
        image=request.files.get("image"),
        blob_store=current_app.extensions["blob_store"],
    )
    return jsonify({"message": "Blog post created successfully!", "post": post.to_dict()}), 201


# 🟣 Listar posts (filtro opcional por categoría)
@post_bp.route("/posts", methods=["GET"])
def get_posts():
    items = posts.list_posts(request.args.get("category"))
    return jsonify([p.to_dict() for p in items]), 200


@post_bp.route("/scholarships", methods=["GET"])
def get_scholarships():
    return jsonify([p.to_dict() for p in posts.list_posts("scholarships")]), 200


@post_bp.route("/jobs", methods=["GET"])
def get_jobs():
    return jsonify([p.to_dict() for p in posts.list_posts("jobs")]), 200


# 🔵 Ver un solo post
@post_bp.route("/posts/<post_id>", methods=["GET"])
def get_post_detail(post_id):
    return jsonify(posts.get_post(post_id).to_dict()), 200


# ❤️ Like / unlike
@post_bp.route("/posts/<post_id>/like", methods=["POST"])
@token_required
def like_post(post_id):
    return jsonify(posts.toggle_post_like(post_id, g.current_user["id"])), 200


# 🔴 Borrar post (solo el autor) + imagen en el blob store
@post_bp.route("/posts/<post_id>", methods=["DELETE"])
@token_required
def delete_post(post_id):
    posts.delete_post(post_id, g.current_user["id"], blob_store=current_app.extensions["blob_store"])
    return jsonify({"message": "Post removed successfully."}), 200
