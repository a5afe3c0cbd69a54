import io
import logging

from flask import Blueprint, Response, current_app, request, jsonify, send_file
from flask_jwt_extended import jwt_required

from app.databases import get_or_404, list_for_user, delete_record, generated_cv_to_dict
from app.models import GeneratedCV
from app.schemas import SummaryUpdateSchema, validate_payload
from app.services.authorization import current_policy
from app.services.cv_assembler import CvAssembler, update_summary
from app.services.cv_documents import build_export_pipeline, render_generated_cv

logger = logging.getLogger(__name__)

generated_cv_bp = Blueprint("generated_cv", __name__)


def _owned_cv(cv_id) -> GeneratedCV:
    generated_cv = get_or_404(GeneratedCV, cv_id, "Generated CV")
    return current_policy().check_user_owned(generated_cv, "Generated CV")


@generated_cv_bp.route("/generate", methods=["POST"])
@jwt_required()
def generate_cv():
    policy = current_policy()
    assembler = CvAssembler(writer=current_app.extensions.get("cv_writer"))
    generated_cv = assembler.generate(policy.user_id, request.get_json(silent=True))
    return jsonify(generated_cv_to_dict(generated_cv)), 201


@generated_cv_bp.route("", methods=["GET"])
@jwt_required()
def list_generated_cvs():
    policy = current_policy()
    return jsonify([generated_cv_to_dict(cv) for cv in list_for_user(GeneratedCV, policy.user_id)]), 200


@generated_cv_bp.route("/<cv_id>", methods=["GET"])
@jwt_required()
def get_generated_cv(cv_id):
    return jsonify(generated_cv_to_dict(_owned_cv(cv_id))), 200


@generated_cv_bp.route("/<cv_id>", methods=["PATCH"])
@jwt_required()
def update_generated_cv(cv_id):
    generated_cv = _owned_cv(cv_id)
    data = validate_payload(SummaryUpdateSchema, request.get_json(silent=True))
    generated_cv = update_summary(generated_cv, data.professional_summary)
    return jsonify(generated_cv_to_dict(generated_cv)), 200


@generated_cv_bp.route("/<cv_id>", methods=["DELETE"])
@jwt_required()
def delete_generated_cv(cv_id):
    delete_record(_owned_cv(cv_id))
    return "", 204


@generated_cv_bp.route("/<cv_id>/preview", methods=["GET"])
@jwt_required()
def preview_generated_cv(cv_id):
    document = render_generated_cv(_owned_cv(cv_id), request.args.get("template"))
    return Response(document.html, mimetype="text/html")


@generated_cv_bp.route("/<cv_id>/pdf", methods=["GET"])
@jwt_required()
def export_generated_cv(cv_id):
    document = render_generated_cv(_owned_cv(cv_id), request.args.get("template"))

    factory = current_app.extensions.get("export_pipeline_factory", build_export_pipeline)
    result = factory(current_app.config).export(document)

    return send_file(
        io.BytesIO(result.pdf),
        mimetype="application/pdf",
        as_attachment=True,
        download_name=result.filename,
    )
