"""Validation helpers shared by the partial-update schemas."""


def reject_null(value):
    """Columns that are NOT NULL may be left out of an update but never cleared."""
    if value is None:
        raise ValueError("Field may be omitted but cannot be null")
    return value


def clip(value, limit: int):
    """Trim free-form client strings to the column width."""
    if value is None:
        return None
    return value[:limit]
