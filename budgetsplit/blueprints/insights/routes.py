from flask import Blueprint, jsonify
from flask_login import login_required, current_user

from ...extensions import db
from ...schemas import MonthQuery, SpendingQuery
from ...services import insights
from ..helpers import parse_args

insights_bp = Blueprint("insights", __name__, url_prefix="/api/v1/insights")


@insights_bp.route("/spending")
@login_required
def spending():
    query = parse_args(SpendingQuery)
    rows = insights.spending_by_category(
        db.session,
        current_user.id,
        start_date=query.start_date,
        end_date=query.end_date,
        type=query.type,
        allocation_bucket=query.allocation_bucket,
    )
    return jsonify(rows)


@insights_bp.route("/budget-status")
@login_required
def budget_status():
    query = parse_args(MonthQuery)
    return jsonify(insights.budget_status(db.session, current_user.id, query.month))


@insights_bp.route("/allocation-summary")
@login_required
def allocation_summary():
    query = parse_args(MonthQuery)
    return jsonify(insights.allocation_summary(db.session, current_user.id, query.month))
