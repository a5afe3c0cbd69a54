"""CRUD blueprints for the entities that hang off a profile."""
import logging

from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required

from app.databases import (
    get_or_404,
    list_for_profile,
    create_record,
    update_record,
    delete_record,
    work_experience_to_dict,
    education_to_dict,
    skill_to_dict,
    project_to_dict,
    certification_to_dict,
    language_to_dict,
)
from app.errors import ValidationError
from app.models import WorkExperience, Education, Skill, Project, Certification, Language
from app.schemas import (
    WorkExperienceSchema,
    EducationSchema,
    SkillSchema,
    ProjectSchema,
    CertificationSchema,
    LanguageSchema,
    validate_payload,
    validate_patch,
)
from app.services.authorization import current_policy

logger = logging.getLogger(__name__)

# url prefix, model, input schema, serializer, display name
PROFILE_RESOURCES = [
    ("work-experience", WorkExperience, WorkExperienceSchema, work_experience_to_dict, "Work experience"),
    ("education", Education, EducationSchema, education_to_dict, "Education"),
    ("skill", Skill, SkillSchema, skill_to_dict, "Skill"),
    ("project", Project, ProjectSchema, project_to_dict, "Project"),
    ("certification", Certification, CertificationSchema, certification_to_dict, "Certification"),
    ("language", Language, LanguageSchema, language_to_dict, "Language"),
]


def make_resource_blueprint(name, model, schema, to_dict, kind):
    bp = Blueprint(name.replace("-", "_"), __name__)

    @bp.route("", methods=["POST"])
    @jwt_required()
    def create():
        data = validate_payload(schema, request.get_json(silent=True))
        current_policy().profile(data.profile_id)
        record = create_record(model, data.model_dump())
        return jsonify(to_dict(record)), 201

    @bp.route("", methods=["GET"])
    @jwt_required()
    def list_all():
        profile_id = request.args.get("profileId")
        if not profile_id:
            raise ValidationError.for_field("profileId", "profileId query parameter is required")
        current_policy().profile(profile_id)
        return jsonify([to_dict(r) for r in list_for_profile(model, profile_id)]), 200

    @bp.route("/<entity_id>", methods=["GET"])
    @jwt_required()
    def get_one(entity_id):
        record = get_or_404(model, entity_id, kind)
        current_policy().check_child(record)
        return jsonify(to_dict(record)), 200

    @bp.route("/<entity_id>", methods=["PATCH"])
    @jwt_required()
    def update(entity_id):
        policy = current_policy()
        record = get_or_404(model, entity_id, kind)
        policy.check_child(record)

        values = validate_patch(schema, record, request.get_json(silent=True))
        # moving an entry is only allowed between the caller's own profiles
        if "profile_id" in values and values["profile_id"] != record.profile_id:
            policy.profile(values["profile_id"])

        record = update_record(record, values)
        return jsonify(to_dict(record)), 200

    @bp.route("/<entity_id>", methods=["DELETE"])
    @jwt_required()
    def delete(entity_id):
        record = get_or_404(model, entity_id, kind)
        current_policy().check_child(record)
        delete_record(record)
        return "", 204

    return bp


def resource_blueprints():
    return [
        (name, make_resource_blueprint(name, model, schema, to_dict, kind))
        for name, model, schema, to_dict, kind in PROFILE_RESOURCES
    ]
