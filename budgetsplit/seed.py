from .models import Category

# (name, type, allocation bucket, icon)
DEFAULT_CATEGORIES = [
    # Needs
    ("Rent/Mortgage", "expense", "needs", "🏠"),
    ("Groceries", "expense", "needs", "🛒"),
    ("Utilities", "expense", "needs", "⚡"),
    ("Insurance", "expense", "needs", "🛡️"),
    ("Transportation", "expense", "needs", "🚗"),
    ("Healthcare", "expense", "needs", "🏥"),
    # Wants
    ("Dining Out", "expense", "wants", "🍽️"),
    ("Entertainment", "expense", "wants", "🎬"),
    ("Shopping", "expense", "wants", "🛍️"),
    ("Subscriptions", "expense", "wants", "📺"),
    ("Hobbies", "expense", "wants", "🎨"),
    # Future
    ("Savings", "expense", "future", "💰"),
    ("Investments", "expense", "future", "📈"),
    ("Emergency Fund", "expense", "future", "🏦"),
    ("Debt Repayment", "expense", "future", "💳"),
    # Income carries no bucket
    ("Salary", "income", None, "💵"),
    ("Freelance", "income", None, "💼"),
    ("Other Income", "income", None, "💸"),
]


def seed_default_categories(session, user_id):
    """Give a freshly registered user the starter category set."""
    created = [
        Category(user_id=user_id, name=name, type=ctype, allocation_bucket=bucket, icon=icon)
        for name, ctype, bucket, icon in DEFAULT_CATEGORIES
    ]
    session.add_all(created)
    return created
