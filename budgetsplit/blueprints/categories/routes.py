from flask import Blueprint, current_app, jsonify
from flask_login import login_required, current_user

from ...errors import ValidationError
from ...extensions import db
from ...models import Category
from ...repository import owned
from ...schemas import CategoryCreate, CategoryUpdate
from ..helpers import parse_body

categories_bp = Blueprint("categories", __name__, url_prefix="/api/v1/categories")


@categories_bp.route("", methods=["GET"])
@login_required
def list_categories():
    cats = owned(Category).query().order_by(Category.type, Category.name).all()
    return jsonify([c.to_dict() for c in cats])


@categories_bp.route("", methods=["POST"])
@login_required
def create_category():
    data = parse_body(CategoryCreate)
    cat = owned(Category).add(**data.model_dump())
    db.session.commit()
    current_app.logger.info("Category %s created for user %s", cat.id, current_user.id)
    return jsonify(cat.to_dict()), 201


@categories_bp.route("/<int:category_id>", methods=["GET"])
@login_required
def get_category(category_id):
    cat = owned(Category).get_or_404(category_id)
    return jsonify(cat.to_dict())


@categories_bp.route("/<int:category_id>", methods=["PATCH"])
@login_required
def update_category(category_id):
    repo = owned(Category)
    cat = repo.get_or_404(category_id)
    changes = parse_body(CategoryUpdate).changes()
    if cat.type == "income" and changes.get("allocation_bucket") is not None:
        raise ValidationError("Income categories cannot have an allocation bucket")
    repo.update(cat, changes)
    db.session.commit()
    return jsonify(cat.to_dict())


@categories_bp.route("/<int:category_id>", methods=["DELETE"])
@login_required
def delete_category(category_id):
    repo = owned(Category)
    cat = repo.get_or_404(category_id)
    # transactions are detached, budgets go with the category
    repo.delete(cat)
    db.session.commit()
    current_app.logger.info("Category %s deleted for user %s", category_id, current_user.id)
    return jsonify({"message": "Category deleted successfully"})
