from typing import Any

from sqlalchemy import inspect

from app.core.exceptions import InvalidInputError


def apply_dict_updates(entity: object, update_data: dict[str, Any], excluded_attrs: set[str] | None) -> None:
    """
    Applies key-value pairs from a dictionary to a mapped ORM entity.

    Args:
        entity: The SQLAlchemy ORM object (pending or loaded into the session).
        update_data: Dictionary of column names and values.
        excluded_attrs: Attribute names that are silently skipped (id, created_at, ...).

    Raises:
        InvalidInputError: a key is not a mapped column of the entity.
    """
    excluded_attrs = excluded_attrs if excluded_attrs else set()
    columns = {attr.key for attr in inspect(type(entity)).column_attrs}

    for key, value in update_data.items():
        if key in excluded_attrs:
            continue

        if key not in columns:
            raise InvalidInputError(f"Unknown field '{key}' for {type(entity).__name__}")

        setattr(entity, key, value)
