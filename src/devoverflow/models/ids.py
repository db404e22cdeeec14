"""Identifier generation for ORM rows."""

import uuid


def new_id() -> str:
    """Return a fresh opaque identifier."""
    return str(uuid.uuid4())
