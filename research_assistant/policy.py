"""Per-owner row access rules.

Every user-facing read and write goes through these helpers, so callers never
filter by owner themselves. The processing job runs with service privileges
and talks to the models directly.
"""
from dataclasses import dataclass

from flask import abort

from .errors import PolicyViolation
from .extensions import db


@dataclass(frozen=True)
class Identity:
    user_id: str
    email: str = ""

    @classmethod
    def from_user(cls, user):
        return cls(user_id=user.id, email=user.email)


def scoped(model, identity: Identity):
    """Query over the rows of ``model`` owned by ``identity``."""
    return model.query.filter(model.user_id == identity.user_id)


def get_owned(model, identity: Identity, row_id):
    return scoped(model, identity).filter(model.id == row_id).first()


def get_owned_or_404(model, identity: Identity, row_id):
    row = get_owned(model, identity, row_id)
    if row is None:
        abort(404)
    return row


def insert_owned(model, identity: Identity, **values):
    """Insert a row and commit. ``user_id`` defaults to the caller and may not differ."""
    owner = values.setdefault("user_id", identity.user_id)
    if owner != identity.user_id:
        raise PolicyViolation(f"{model.__tablename__}: cannot insert a row owned by {owner}")
    row = model(**values)
    db.session.add(row)
    db.session.commit()
    return row


def update_owned(row, identity: Identity, **values):
    if row.user_id != identity.user_id:
        raise PolicyViolation(f"{row.__tablename__}: row {row.id} is not owned by caller")
    for k, v in values.items():
        setattr(row, k, v)
    db.session.commit()
    return row


def delete_owned(model, identity: Identity, row_id) -> int:
    """Delete a caller-owned row by id; returns the number of rows removed."""
    row = get_owned(model, identity, row_id)
    if row is None:
        return 0
    db.session.delete(row)
    db.session.commit()
    return 1
