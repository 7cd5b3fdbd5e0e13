"""Product domain exceptions.

Raised by the Service Layer and the repository.  The API layer (Views)
catches the recoverable ones and translates them into HTTP responses.
"""

from __future__ import annotations


class ProductNotFound(Exception):
    """The requested product does not exist."""


class ProductIdMismatch(Exception):
    """The ``id`` in an update payload differs from the ``id`` in the route."""


class ProductConcurrencyConflict(Exception):
    """A write assumed a row state that changed or vanished before commit.

    Not translated by the views: when the row still exists the conflict
    propagates to Django's generic error handling.
    """
