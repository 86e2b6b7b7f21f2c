from flask import Blueprint, current_app, jsonify
from flask_login import login_required, current_user
from sqlalchemy.orm import joinedload

from ...extensions import db
from ...models import Budget, Category
from ...repository import owned
from ...schemas import BudgetCreate, BudgetUpdate
from ..helpers import parse_body

budgets_bp = Blueprint("budgets", __name__, url_prefix="/api/v1/budgets")


@budgets_bp.route("", methods=["GET"])
@login_required
def list_budgets():
    budgets = (
        owned(Budget).query()
        .options(joinedload(Budget.category))
        .order_by(Budget.period, Budget.start_date, Budget.id)
        .all()
    )
    return jsonify([b.to_dict() for b in budgets])


@budgets_bp.route("", methods=["POST"])
@login_required
def create_budget():
    data = parse_body(BudgetCreate)
    # categoryId comes from the client, so it must be one of the caller's own
    owned(Category).get_or_404(data.category_id)
    budget = owned(Budget).add(**data.model_dump())
    db.session.commit()
    current_app.logger.info("Budget %s created for user %s", budget.id, current_user.id)
    return jsonify(budget.to_dict()), 201


@budgets_bp.route("/<int:budget_id>", methods=["GET"])
@login_required
def get_budget(budget_id):
    return jsonify(owned(Budget).get_or_404(budget_id).to_dict())


@budgets_bp.route("/<int:budget_id>", methods=["PATCH"])
@login_required
def update_budget(budget_id):
    repo = owned(Budget)
    budget = repo.get_or_404(budget_id)
    repo.update(budget, parse_body(BudgetUpdate).changes())
    db.session.commit()
    return jsonify(budget.to_dict())


@budgets_bp.route("/<int:budget_id>", methods=["DELETE"])
@login_required
def delete_budget(budget_id):
    repo = owned(Budget)
    repo.delete(repo.get_or_404(budget_id))
    db.session.commit()
    current_app.logger.info("Budget %s deleted for user %s", budget_id, current_user.id)
    return jsonify({"message": "Budget deleted successfully"})
