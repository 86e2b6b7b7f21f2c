import csv
from io import StringIO

from flask import Blueprint, current_app, jsonify, make_response
from flask_login import login_required, current_user
from sqlalchemy.orm import joinedload

from ...extensions import db
from ...models import Category, Transaction
from ...repository import owned
from ...schemas import TransactionCreate, TransactionQuery, TransactionUpdate
from ...schemas.common import end_of_day, start_of_day
from ..helpers import parse_args, parse_body

transactions_bp = Blueprint("transactions", __name__, url_prefix="/api/v1/transactions")


def _filtered(query: TransactionQuery):
    q = owned(Transaction).query().options(joinedload(Transaction.category))
    if query.start_date is not None:
        q = q.filter(Transaction.date >= start_of_day(query.start_date))
    if query.end_date is not None:
        q = q.filter(Transaction.date <= end_of_day(query.end_date))
    if query.type is not None:
        q = q.filter(Transaction.type == query.type)
    if query.category_id is not None:
        q = q.filter(Transaction.category_id == query.category_id)
    if query.search:
        q = q.filter(Transaction.description.ilike(f"%{query.search}%"))
    if query.min_amount is not None:
        q = q.filter(Transaction.amount >= query.min_amount)
    if query.max_amount is not None:
        q = q.filter(Transaction.amount <= query.max_amount)
    return q.order_by(Transaction.date.desc(), Transaction.created_at.desc(), Transaction.id.desc())


def _check_category(category_id):
    # a caller may only file transactions under their own categories
    if category_id is not None:
        owned(Category).get_or_404(category_id)


@transactions_bp.route("", methods=["GET"])
@login_required
def list_transactions():
    query = parse_args(TransactionQuery)
    max_limit = current_app.config["TRANSACTIONS_MAX_LIMIT"]
    limit = min(query.limit or current_app.config["TRANSACTIONS_DEFAULT_LIMIT"], max_limit)

    q = _filtered(query)
    total = q.order_by(None).count()
    rows = q.limit(limit).offset(query.offset).all()
    return jsonify({
        "data": [t.to_dict() for t in rows],
        "pagination": {
            "total": total,
            "limit": limit,
            "offset": query.offset,
            "hasMore": query.offset + len(rows) < total,
        },
    })


@transactions_bp.route("/export.csv", methods=["GET"])
@login_required
def export_csv():
    query = parse_args(TransactionQuery)
    output = StringIO()
    writer = csv.writer(output)
    writer.writerow(["Date", "Type", "Category", "Amount", "Description"])
    for txn in _filtered(query).all():
        writer.writerow([
            txn.date.date().isoformat(),
            txn.type,
            txn.category.name if txn.category is not None else "",
            txn.to_dict()["amount"],
            txn.description or "",
        ])
    response = make_response(output.getvalue())
    response.headers["Content-Disposition"] = "attachment; filename=transactions.csv"
    response.headers["Content-Type"] = "text/csv"
    return response


@transactions_bp.route("", methods=["POST"])
@login_required
def create_transaction():
    data = parse_body(TransactionCreate)
    _check_category(data.category_id)
    txn = owned(Transaction).add(**data.model_dump())
    db.session.commit()
    current_app.logger.info("Transaction %s created for user %s", txn.id, current_user.id)
    return jsonify(txn.to_dict()), 201


@transactions_bp.route("/<int:transaction_id>", methods=["GET"])
@login_required
def get_transaction(transaction_id):
    txn = owned(Transaction).get_or_404(transaction_id)
    return jsonify(txn.to_dict())


@transactions_bp.route("/<int:transaction_id>", methods=["PATCH"])
@login_required
def update_transaction(transaction_id):
    repo = owned(Transaction)
    txn = repo.get_or_404(transaction_id)
    changes = parse_body(TransactionUpdate).changes()
    if "category_id" in changes:
        _check_category(changes["category_id"])
    repo.update(txn, changes)
    db.session.commit()
    return jsonify(txn.to_dict())


@transactions_bp.route("/<int:transaction_id>", methods=["DELETE"])
@login_required
def delete_transaction(transaction_id):
    repo = owned(Transaction)
    repo.delete(repo.get_or_404(transaction_id))
    db.session.commit()
    current_app.logger.info("Transaction %s deleted for user %s", transaction_id, current_user.id)
    return jsonify({"message": "Transaction deleted successfully"})
