from ..extensions import db
from .mixins import TimestampMixin, iso, money_str


class Transaction(TimestampMixin, db.Model):
    __tablename__ = "transactions"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    category_id = db.Column(db.Integer, db.ForeignKey("categories.id", ondelete="SET NULL"), index=True)
    amount = db.Column(db.Numeric(10, 2), nullable=False)
    type = db.Column(db.String(10), nullable=False)  # expense/income
    description = db.Column(db.String(255))
    date = db.Column(db.DateTime, nullable=False, index=True)

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "categoryId": self.category_id,
            "amount": money_str(self.amount),
            "type": self.type,
            "description": self.description,
            "date": iso(self.date),
            "createdAt": iso(self.created_at),
            "updatedAt": iso(self.updated_at),
            "category": self.category.to_dict() if self.category is not None else None,
        }
