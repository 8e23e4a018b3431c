"""Domain-level exceptions.

Every failure of a store operation is one of two kinds, ``NotFound`` or
``InvalidOperation``. Both subclass DomainException so the CLI layer can
catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""

    kind = "DomainException"

    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.msg = msg

    def to_dict(self) -> dict:
        """Tagged error shape, e.g. ``{"NotFound": {"msg": "..."}}``."""
        return {self.kind: {"msg": self.msg}}


class EntityNotFoundError(DomainException):
    """A requested product does not exist."""

    kind = "NotFound"


class InvalidOperationError(DomainException):
    """A mutation was rejected; the store is left unchanged."""

    kind = "InvalidOperation"
