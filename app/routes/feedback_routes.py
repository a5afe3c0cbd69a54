from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required

from app.databases import create_record, list_for_user, feedback_to_dict
from app.models import Feedback
from app.schemas import FeedbackSchema, validate_payload
from app.services.authorization import current_policy

feedback_bp = Blueprint("feedback", __name__)


@feedback_bp.route("", methods=["POST"])
@jwt_required()
def create_feedback():
    policy = current_policy()
    data = validate_payload(FeedbackSchema, request.get_json(silent=True))
    feedback = create_record(Feedback, {"user_id": policy.user_id, "description": data.description})
    return jsonify(feedback_to_dict(feedback)), 201


@feedback_bp.route("", methods=["GET"])
@jwt_required()
def list_feedback():
    policy = current_policy()
    return jsonify([feedback_to_dict(f) for f in list_for_user(Feedback, policy.user_id)]), 200
