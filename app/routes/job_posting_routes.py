import logging

from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required

from app.databases import (
    get_or_404,
    list_for_user,
    create_record,
    update_record,
    delete_record,
    job_posting_to_dict,
)
from app.models import JobPosting
from app.schemas import JobPostingSchema, validate_payload, validate_patch
from app.services.authorization import current_policy
from app.services.keywords import extract_keywords

logger = logging.getLogger(__name__)

job_posting_bp = Blueprint("job_postings", __name__)


@job_posting_bp.route("", methods=["POST"])
@jwt_required()
def create_job_posting():
    policy = current_policy()
    data = validate_payload(JobPostingSchema, request.get_json(silent=True))

    values = data.model_dump()
    values["user_id"] = policy.user_id
    values["keywords"] = extract_keywords(data.job_description)
    logger.info(f"🔑 Extracted {len(values['keywords'])} keywords for '{data.job_title}'")

    job_posting = create_record(JobPosting, values)
    return jsonify(job_posting_to_dict(job_posting)), 201


@job_posting_bp.route("", methods=["GET"])
@jwt_required()
def list_job_postings():
    policy = current_policy()
    return jsonify([job_posting_to_dict(j) for j in list_for_user(JobPosting, policy.user_id)]), 200


@job_posting_bp.route("/<job_posting_id>", methods=["GET"])
@jwt_required()
def get_job_posting(job_posting_id):
    job_posting = get_or_404(JobPosting, job_posting_id, "Job posting")
    current_policy().check_user_owned(job_posting, "Job posting")
    return jsonify(job_posting_to_dict(job_posting)), 200


@job_posting_bp.route("/<job_posting_id>", methods=["PATCH"])
@jwt_required()
def update_job_posting(job_posting_id):
    job_posting = get_or_404(JobPosting, job_posting_id, "Job posting")
    current_policy().check_user_owned(job_posting, "Job posting")

    values = validate_patch(JobPostingSchema, job_posting, request.get_json(silent=True))
    if "job_description" in values and values["job_description"] != job_posting.job_description:
        values["keywords"] = extract_keywords(values["job_description"])

    job_posting = update_record(job_posting, values)
    return jsonify(job_posting_to_dict(job_posting)), 200


@job_posting_bp.route("/<job_posting_id>", methods=["DELETE"])
@jwt_required()
def delete_job_posting(job_posting_id):
    job_posting = get_or_404(JobPosting, job_posting_id, "Job posting")
    current_policy().check_user_owned(job_posting, "Job posting")
    delete_record(job_posting)
    return "", 204
