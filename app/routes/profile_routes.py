import logging

from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required

from app.databases import create_record, update_record, delete_record, profile_to_dict
from app.errors import AuthorizationError, ConflictError, NotFoundError
from app.models import Profile
from app.schemas import ProfileSchema, validate_payload, validate_patch
from app.services.authorization import current_policy

logger = logging.getLogger(__name__)

profile_bp = Blueprint("profile", __name__)


@profile_bp.route("", methods=["POST"])
@jwt_required()
def create_profile():
    policy = current_policy()
    data = validate_payload(ProfileSchema, request.get_json(silent=True))

    if Profile.query.filter_by(user_id=policy.user_id).first():
        raise ConflictError("A profile already exists for this user")

    profile = create_record(Profile, {"user_id": policy.user_id, **data.model_dump()})
    return jsonify(profile_to_dict(profile)), 201


@profile_bp.route("", methods=["GET"])
@jwt_required()
def get_profile_by_user():
    policy = current_policy()
    user_id = request.args.get("userId") or policy.user_id
    if user_id != policy.user_id:
        raise AuthorizationError("You do not have access to this profile")

    profile = Profile.query.filter_by(user_id=user_id).first()
    if not profile:
        raise NotFoundError("Profile for user", user_id)
    return jsonify(profile_to_dict(profile)), 200


@profile_bp.route("/me", methods=["GET"])
@jwt_required()
def get_my_profile():
    policy = current_policy()
    profile = Profile.query.filter_by(user_id=policy.user_id).first()
    if not profile:
        raise NotFoundError("Profile for user", policy.user_id)
    return jsonify(profile_to_dict(profile)), 200


@profile_bp.route("/<profile_id>", methods=["GET"])
@jwt_required()
def get_profile(profile_id):
    profile = current_policy().profile(profile_id)
    return jsonify(profile_to_dict(profile)), 200


@profile_bp.route("/<profile_id>", methods=["PATCH"])
@jwt_required()
def update_profile(profile_id):
    profile = current_policy().profile(profile_id)
    values = validate_patch(ProfileSchema, profile, request.get_json(silent=True))
    profile = update_record(profile, values)
    return jsonify(profile_to_dict(profile)), 200


@profile_bp.route("/<profile_id>", methods=["DELETE"])
@jwt_required()
def delete_profile(profile_id):
    profile = current_policy().profile(profile_id)
    delete_record(profile)
    return "", 204
