from ..extensions import db
from .mixins import TimestampMixin, iso


class Category(TimestampMixin, db.Model):
    __tablename__ = "categories"
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = db.Column(db.String(50), nullable=False)
    type = db.Column(db.String(10), nullable=False)  # expense/income
    allocation_bucket = db.Column(db.String(10))  # needs/wants/future, null for income
    icon = db.Column(db.String(10))

    # deleting a category detaches its transactions but drops its budgets
    transactions = db.relationship("Transaction", backref="category", lazy=True)
    budgets = db.relationship("Budget", backref="category", lazy=True, cascade="all, delete-orphan")

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "name": self.name,
            "type": self.type,
            "allocationBucket": self.allocation_bucket,
            "icon": self.icon,
            "createdAt": iso(self.created_at),
            "updatedAt": iso(self.updated_at),
        }
