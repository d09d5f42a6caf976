"""Build and check the result mapping submitted when completing a task."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from usertasks.domain.enums import UserTaskFieldType
from usertasks.domain.exceptions import ValidationException
from usertasks.schemas.common import UserTaskFieldDTO, UserTaskVariableValue

_TRUE = frozenset({"true", "yes", "1", "on"})
_FALSE = frozenset({"false", "no", "0", "off"})


def _coerce(field: UserTaskFieldDTO, raw: Any) -> bool | int | float | str:
    """Convert a raw (often form-submitted) value to the field's type."""
    try:
        if field.type == UserTaskFieldType.STRING:
            return str(raw)
        if field.type == UserTaskFieldType.BOOLEAN:
            if isinstance(raw, bool):
                return raw
            text = str(raw).strip().lower()
            if text in _TRUE:
                return True
            if text in _FALSE:
                return False
            raise ValueError(f"not a boolean: {raw!r}")
        if field.type == UserTaskFieldType.INTEGER:
            if isinstance(raw, bool):
                raise ValueError("booleans are not integers")
            if isinstance(raw, float):
                if not raw.is_integer():
                    raise ValueError(f"not an integer: {raw!r}")
                return int(raw)
            return int(str(raw).strip())
        if field.type == UserTaskFieldType.DOUBLE:
            if isinstance(raw, bool):
                raise ValueError("booleans are not numbers")
            return float(str(raw).strip()) if isinstance(raw, str) else float(raw)
    except (TypeError, ValueError) as e:
        raise ValidationException(
            f"Invalid value for field '{field.name}' ({field.type.value}): {e}",
            field=field.name,
        ) from e
    raise ValidationException(
        f"Field '{field.name}' has an unrecognized type and cannot be submitted",
        field=field.name,
    )


def _is_blank(raw: Any) -> bool:
    return raw is None or (isinstance(raw, str) and not raw.strip())


def build_task_result(
    fields: Iterable[UserTaskFieldDTO],
    values: Mapping[str, Any],
) -> dict[str, UserTaskVariableValue]:
    """Turn raw values into the typed mapping the result endpoint expects.

    Blank optional fields are left out. Values for fields with options
    must be one of the options.

    Args:
        fields: Field definitions of the task's UserTaskDef.
        values: Raw values keyed by field name.

    Returns:
        Mapping of field name to UserTaskVariableValue.

    Raises:
        ValidationException: On unknown field names, missing required
            fields, uncoercible values or values outside the options.
    """
    fields = list(fields)
    known = {f.name for f in fields}
    unknown = [name for name in values if name not in known]
    if unknown:
        raise ValidationException(
            f"Unknown field(s): {', '.join(sorted(unknown))}", field=unknown[0]
        )

    result: dict[str, UserTaskVariableValue] = {}
    for field in fields:
        raw = values.get(field.name)
        if _is_blank(raw):
            if field.required:
                raise ValidationException(
                    f"Field '{field.name}' is required", field=field.name
                )
            continue
        value = _coerce(field, raw)
        if field.options and str(value) not in field.options:
            raise ValidationException(
                f"Value for field '{field.name}' must be one of: {', '.join(field.options)}",
                field=field.name,
            )
        result[field.name] = UserTaskVariableValue(type=field.type, value=value)
    return result


def check_task_result(
    fields: Iterable[UserTaskFieldDTO],
    results: Mapping[str, UserTaskVariableValue],
) -> None:
    """Check an already-typed result mapping against the field definitions.

    Raises:
        ValidationException: When a required field is missing, a name is
            unknown, or a value's type tag differs from its field's type.
    """
    by_name = {f.name: f for f in fields}
    for name, value in results.items():
        field = by_name.get(name)
        if field is None:
            raise ValidationException(f"Unknown field: {name}", field=name)
        if value.type != field.type:
            raise ValidationException(
                f"Field '{name}' expects {field.type.value}, got {value.type.value}",
                field=name,
            )
    for field in by_name.values():
        if field.required and field.name not in results:
            raise ValidationException(
                f"Field '{field.name}' is required", field=field.name
            )
