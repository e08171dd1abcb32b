# edgeblog/routes/comment_routes.py
from flask import Blueprint, g, jsonify, request

from edgeblog.auth.decorators import token_required
from edgeblog.services import comments

comment_bp = Blueprint("comments", __name__)


@comment_bp.route("/posts/<post_id>/comments", methods=["GET"])
def get_comments(post_id):
    items = comments.list_comments(post_id)
    return jsonify([c.to_dict(nested=True) for c in items]), 200


# 💬 Agregar comentario: authorId o author_info {fullName, email}
@comment_bp.route("/<post_id>", methods=["POST"])
def add_comment(post_id):
    data = request.get_json(silent=True) or {}
    comment = comments.add_comment(
        post_id,
        data.get("content"),
        author_id=data.get("authorId"),
        author_info=data.get("author_info"),
        parent_id=data.get("parentId"),
    )
    return jsonify(comment.to_dict()), 201


@comment_bp.route("/comments/<comment_id>/like", methods=["POST"])
@token_required
def like_comment(comment_id):
    return jsonify(comments.toggle_comment_like(comment_id, g.current_user["id"])), 200
