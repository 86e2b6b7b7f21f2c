from flask_login import current_user

from .errors import NotFoundError
from .extensions import db
from .models.mixins import utcnow


class OwnedRepository:
    """Data access for one model, pinned to a single owning user.

    Every query built here already carries the ``user_id`` filter, so a
    handler cannot forget it. Rows owned by somebody else behave exactly
    like rows that do not exist.
    """

    def __init__(self, session, model, user_id, label=None):
        self.session = session
        self.model = model
        self.user_id = user_id
        self.label = label or model.__name__

    def query(self):
        return self.session.query(self.model).filter(self.model.user_id == self.user_id)

    def columns(self, *entities):
        """Select arbitrary columns/aggregates, still scoped to the owner."""
        return (
            self.session.query(*entities)
            .select_from(self.model)
            .filter(self.model.user_id == self.user_id)
        )

    def get(self, pk):
        return self.query().filter(self.model.id == pk).first()

    def get_or_404(self, pk):
        obj = self.get(pk)
        if obj is None:
            raise NotFoundError(f"{self.label} not found")
        return obj

    def add(self, **fields):
        obj = self.model(user_id=self.user_id, **fields)
        self.session.add(obj)
        return obj

    def update(self, obj, fields: dict):
        for key, value in fields.items():
            setattr(obj, key, value)
        obj.updated_at = utcnow()
        return obj

    def delete(self, obj):
        self.session.delete(obj)


def owned(model, label=None):
    """Repository for ``model`` bound to the request session and logged-in user."""
    return OwnedRepository(db.session, model, current_user.id, label=label)
