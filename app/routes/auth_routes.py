import logging

from flask import Blueprint, request, jsonify

from app.schemas import LoginSchema, RegisterSchema, validate_payload
from app.services.auth import AuthService

logger = logging.getLogger(__name__)

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/register", methods=["POST"])
def register():
    data = validate_payload(RegisterSchema, request.get_json(silent=True))
    token = AuthService.register(data.name, data.email, data.password)
    return jsonify({"access_token": token}), 201


@auth_bp.route("/login", methods=["POST"])
def login():
    data = validate_payload(LoginSchema, request.get_json(silent=True))
    token = AuthService.authenticate_user(data.email, data.password)
    return jsonify({"access_token": token}), 200
