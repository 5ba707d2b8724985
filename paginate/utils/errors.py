"""Pagination input errors with actionable messages."""
from pydantic import ValidationError


class PaginationError(ValueError):
    """Raised when a length, limit or offset is not a non-negative integer."""


def describe_validation_error(e: ValidationError) -> str:
    """Return a human-readable message for a failed PaginationParams check.

    One line per offending field, naming the value that was given and
    what would have been accepted.
    """
    lines = []
    for err in e.errors():
        name = ".".join(str(part) for part in err.get("loc", ())) or "value"
        value = err.get("input")
        kind = err.get("type", "")

        if kind == "greater_than_equal":
            lines.append(
                f"Error: {name} must be >= 0, got {value!r}. "
                "Use 0 for an empty collection or a zero page size."
            )
        elif kind in ("int_type", "int_parsing", "int_from_float"):
            lines.append(
                f"Error: {name} must be a whole number, got {value!r} "
                f"({type(value).__name__})."
            )
        else:
            lines.append(f"Error: {name} is invalid ({err.get('msg', kind)}).")
    return "\n".join(lines)
