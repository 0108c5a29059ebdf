"""Machine status enum shared by models, schemas and the deriver."""
from enum import Enum


class UnknownStatusError(ValueError):
    """Raised when a report carries a status literal outside the Status enum."""


class Status(str, Enum):
    """Operability of a return machine. Declaration order is the tie-break order."""

    WORKING = "WORKING"
    ISSUES = "ISSUES"
    OUT_OF_ORDER = "OUT_OF_ORDER"

    @classmethod
    def parse(cls, value: "Status | str") -> "Status":
        """Return the Status for value; raise UnknownStatusError for anything else."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownStatusError(f"Unknown status literal: {value!r}") from None
