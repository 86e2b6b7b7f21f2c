from flask import Blueprint, current_app, jsonify
from flask_login import login_required, current_user

from ...errors import ConflictError, NotFoundError
from ...extensions import db
from ...models import FinancialProfile
from ...repository import owned
from ...schemas import FinancialProfileCreate, FinancialProfileUpdate
from ..helpers import parse_body

financial_profile_bp = Blueprint("financial_profile", __name__, url_prefix="/api/v1/financial-profile")


def _profile_or_404():
    profile = owned(FinancialProfile).query().first()
    if profile is None:
        raise NotFoundError("Financial profile not found")
    return profile


@financial_profile_bp.route("", methods=["GET"])
@login_required
def get_profile():
    return jsonify(_profile_or_404().to_dict())


@financial_profile_bp.route("", methods=["POST"])
@login_required
def create_profile():
    data = parse_body(FinancialProfileCreate)
    repo = owned(FinancialProfile)
    if repo.query().first() is not None:
        raise ConflictError("Financial profile already exists")
    profile = repo.add(**data.model_dump())
    db.session.commit()
    current_app.logger.info("Financial profile created for user %s", current_user.id)
    return jsonify(profile.to_dict()), 201


@financial_profile_bp.route("", methods=["PATCH"])
@login_required
def update_profile():
    data = parse_body(FinancialProfileUpdate)
    profile = _profile_or_404()
    owned(FinancialProfile).update(profile, data.changes())
    db.session.commit()
    return jsonify(profile.to_dict())
