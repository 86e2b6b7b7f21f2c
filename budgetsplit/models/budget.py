from ..extensions import db
from .mixins import TimestampMixin, iso, money_str


class Budget(TimestampMixin, db.Model):
    __tablename__ = "budgets"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    category_id = db.Column(
        db.Integer, db.ForeignKey("categories.id", ondelete="CASCADE"), nullable=False, index=True
    )
    amount = db.Column(db.Numeric(10, 2), nullable=False)
    period = db.Column(db.String(10), nullable=False, default="monthly")  # monthly/weekly
    start_date = db.Column(db.DateTime, nullable=False)

    # Several budgets may share (user, category, period); nothing here forbids it.

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "categoryId": self.category_id,
            "amount": money_str(self.amount),
            "period": self.period,
            "startDate": iso(self.start_date),
            "createdAt": iso(self.created_at),
            "updatedAt": iso(self.updated_at),
            "category": self.category.to_dict() if self.category is not None else None,
        }
