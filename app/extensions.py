from flask import jsonify
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_jwt_extended import JWTManager
from flask_bcrypt import Bcrypt
from flask_cors import CORS

cors = CORS()

db = SQLAlchemy()
migrate = Migrate()

# bearer tokens for every /api resource
jwt = JWTManager()

bcrypt = Bcrypt()


# JWT failures use the same {"error": ...} body as every other API error
@jwt.unauthorized_loader
def missing_token(reason):
    return jsonify({"error": f"Authentication required: {reason}"}), 401


@jwt.invalid_token_loader
def invalid_token(reason):
    return jsonify({"error": f"Invalid token: {reason}"}), 401


@jwt.expired_token_loader
def expired_token(jwt_header, jwt_payload):
    return jsonify({"error": "Token has expired"}), 401
