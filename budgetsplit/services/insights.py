"""Read-model aggregations behind ``/api/v1/insights``."""
import calendar
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP

from sqlalchemy import and_, func
from sqlalchemy.orm import joinedload

from ..errors import NotFoundError, ValidationError
from ..models import Budget, Category, FinancialProfile, Transaction
from ..models.mixins import money_str
from ..repository import OwnedRepository
from ..schemas.common import BUCKETS, end_of_day, start_of_day
from ..schemas.insights import MONTH_RE

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def month_window(month: str):
    """``"2024-03"`` -> (2024-03-01 00:00:00, 2024-03-31 23:59:59)."""
    if not month or not MONTH_RE.match(month):
        raise ValidationError("month parameter is required (YYYY-MM format)")
    year, mon = int(month[:4]), int(month[5:])
    if not 1 <= mon <= 12:
        raise ValidationError("month must be between 01 and 12")
    last_day = calendar.monthrange(year, mon)[1]
    # Month reports stop at 23:59:59 on the last day, unlike the endDate
    # filters (end_of_day). Change both together or neither.
    return datetime(year, mon, 1), datetime(year, mon, last_day, 23, 59, 59)


def _owned_category_join(user_id):
    return and_(Transaction.category_id == Category.id, Category.user_id == user_id)


def spending_by_category(session, user_id, start_date=None, end_date=None, type=None, allocation_bucket=None):
    repo = OwnedRepository(session, Transaction, user_id)
    q = repo.columns(
        Transaction.category_id,
        Category.name,
        Category.type,
        Category.allocation_bucket,
        Category.icon,
        func.sum(Transaction.amount).label("total"),
    ).join(Category, _owned_category_join(user_id))

    if start_date is not None:
        q = q.filter(Transaction.date >= start_of_day(start_date))
    if end_date is not None:
        q = q.filter(Transaction.date <= end_of_day(end_date))
    if type is not None:
        q = q.filter(Transaction.type == type)

    rows = (
        q.group_by(
            Transaction.category_id,
            Category.name,
            Category.type,
            Category.allocation_bucket,
            Category.icon,
        )
        .order_by(Category.name)
        .all()
    )

    result = [
        {
            "categoryId": category_id,
            "categoryName": name,
            "categoryType": category_type,
            "allocationBucket": bucket,
            "icon": icon,
            "total": money_str(total or ZERO),
        }
        for category_id, name, category_type, bucket, icon, total in rows
    ]
    # Bucket lives on the category, so filtering whole groups is enough.
    if allocation_bucket is not None:
        result = [r for r in result if r["allocationBucket"] == allocation_bucket]
    return result


def _expense_totals_by_category(session, user_id, start, end):
    repo = OwnedRepository(session, Transaction, user_id)
    return (
        repo.columns(Transaction.category_id, func.sum(Transaction.amount))
        .filter(
            Transaction.type == "expense",
            Transaction.date >= start,
            Transaction.date <= end,
        )
        .group_by(Transaction.category_id)
        .all()
    )


def budget_status_row(budget, spent):
    budget_amount = Decimal(budget.amount)
    spent_amount = Decimal(spent) if spent is not None else ZERO
    if budget_amount > 0:
        ratio = (spent_amount / budget_amount * HUNDRED).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        percentage = int(min(HUNDRED, ratio))
    else:
        percentage = 0
    category = budget.category
    return {
        "budgetId": budget.id,
        "categoryId": budget.category_id,
        "categoryName": category.name if category is not None else None,
        "categoryIcon": category.icon if category is not None else None,
        "budgetAmount": float(budget_amount),
        "spentAmount": float(spent_amount),
        # negative when over budget
        "remainingAmount": float(budget_amount - spent_amount),
        "percentage": percentage,
    }


def budget_status(session, user_id, month):
    start, end = month_window(month)
    budgets = (
        OwnedRepository(session, Budget, user_id)
        .query()
        .options(joinedload(Budget.category))
        .filter(Budget.period == "monthly", Budget.start_date <= end)
        .order_by(Budget.start_date, Budget.id)
        .all()
    )
    spent = dict(_expense_totals_by_category(session, user_id, start, end))
    return [budget_status_row(b, spent.get(b.category_id)) for b in budgets]


def allocation_breakdown(profile, bucket_totals, income):
    actual = {b: Decimal(bucket_totals.get(b) or ZERO) for b in BUCKETS}
    total_spent = sum(actual.values(), ZERO)
    target_income = Decimal(profile.monthly_income_target)

    return {
        "income": float(Decimal(income or ZERO)),
        "targets": {
            b: float(target_income * profile.bucket_percentage(b) / HUNDRED) for b in BUCKETS
        },
        "actual": {b: float(actual[b]) for b in BUCKETS},
        "percentages": {
            b: float(actual[b] / total_spent * HUNDRED) if total_spent > 0 else 0 for b in BUCKETS
        },
        "profile": {
            "monthlyIncomeTarget": float(target_income),
            "needsPercentage": float(profile.needs_percentage),
            "wantsPercentage": float(profile.wants_percentage),
            "futurePercentage": float(profile.future_percentage),
        },
    }


def allocation_summary(session, user_id, month):
    start, end = month_window(month)
    profile = OwnedRepository(session, FinancialProfile, user_id).query().first()
    if profile is None:
        raise NotFoundError("Financial profile not found")

    repo = OwnedRepository(session, Transaction, user_id)
    in_month = (Transaction.date >= start, Transaction.date <= end)
    bucket_rows = (
        repo.columns(Category.allocation_bucket, func.sum(Transaction.amount))
        .join(Category, _owned_category_join(user_id))
        .filter(Transaction.type == "expense", *in_month)
        .group_by(Category.allocation_bucket)
        .all()
    )
    income = repo.columns(func.sum(Transaction.amount)).filter(Transaction.type == "income", *in_month).scalar()
    return allocation_breakdown(profile, dict(bucket_rows), income)
