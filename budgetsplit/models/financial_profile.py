from decimal import Decimal
from ..extensions import db
from .mixins import TimestampMixin, iso, money_str


class FinancialProfile(TimestampMixin, db.Model):
    __tablename__ = "financial_profiles"
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    monthly_income_target = db.Column(db.Numeric(12, 2), nullable=False)
    needs_percentage = db.Column(db.Numeric(5, 2), nullable=False, default=Decimal("50.00"))
    wants_percentage = db.Column(db.Numeric(5, 2), nullable=False, default=Decimal("30.00"))
    future_percentage = db.Column(db.Numeric(5, 2), nullable=False, default=Decimal("20.00"))

    def bucket_percentage(self, bucket: str) -> Decimal:
        return Decimal(getattr(self, f"{bucket}_percentage"))

    def to_dict(self):
        return {
            "userId": self.user_id,
            "monthlyIncomeTarget": money_str(self.monthly_income_target),
            "needsPercentage": money_str(self.needs_percentage),
            "wantsPercentage": money_str(self.wants_percentage),
            "futurePercentage": money_str(self.future_percentage),
            "createdAt": iso(self.created_at),
            "updatedAt": iso(self.updated_at),
        }
