from flask import Blueprint, current_app, jsonify
from flask_login import login_user, logout_user, login_required, current_user

from ...errors import AuthenticationError, ConflictError
from ...extensions import db
from ...models import User
from ...schemas import LoginRequest, RegisterRequest
from ...seed import seed_default_categories
from ..helpers import parse_body

auth_bp = Blueprint("auth", __name__, url_prefix="/api/v1/auth")


@auth_bp.route("/register", methods=["POST"])
def register():
    data = parse_body(RegisterRequest)
    if User.query.filter_by(email=data.email).first():
        raise ConflictError("Email already registered")
    user = User(name=data.name, email=data.email)
    user.set_password(data.password)
    db.session.add(user)
    db.session.flush()  # need user.id for the starter categories
    seed_default_categories(db.session, user.id)
    db.session.commit()
    login_user(user)
    current_app.logger.info("Registered user %s", user.id)
    return jsonify(user.to_dict()), 201


@auth_bp.route("/login", methods=["POST"])
def login():
    data = parse_body(LoginRequest)
    user = User.query.filter_by(email=data.email).first()
    if user is None or not user.check_password(data.password):
        raise AuthenticationError("Invalid credentials")
    login_user(user)
    return jsonify(user.to_dict())


@auth_bp.route("/logout", methods=["POST"])
@login_required
def logout():
    logout_user()
    return jsonify({"message": "Logged out"})


@auth_bp.route("/session", methods=["GET"])
@login_required
def session():
    return jsonify(current_user.to_dict())
