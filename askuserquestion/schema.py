"""JSON schema generation and input conversion for dataclasses."""

from __future__ import annotations

import dataclasses
from typing import (
    Annotated,
    Any,
    get_args,
    get_origin,
    get_type_hints,
)

# Loose type for schema dicts (allows dynamic schema generation)
InputSchemaDict = dict[str, object]


class Desc:
    """Field description (and array bounds) for JSON schema generation.

    Used inside Annotated[]:
        @dataclass
        class Input:
            city: Annotated[str, Desc("City name like Tokyo")]
            tags: Annotated[list[str], Desc("Tags", min_items=1, max_items=3)]
    """

    def __init__(
        self,
        description: str,
        min_items: int | None = None,
        max_items: int | None = None,
    ):
        self.description = description
        self.min_items = min_items
        self.max_items = max_items


def _unwrap_annotated(hint: Any) -> tuple[Any, Desc | None]:
    if get_origin(hint) is Annotated:
        base_type, *metadata = get_args(hint)
        for m in metadata:
            if isinstance(m, Desc):
                return base_type, m
        return base_type, None
    return hint, None


def _sequence_item_type(py_type: Any) -> Any | None:
    """Item type of list[T] or tuple[T, ...], else None."""
    origin = get_origin(py_type)
    args = get_args(py_type)
    if origin is list and args:
        return args[0]
    if origin is tuple and len(args) == 2 and args[1] is Ellipsis:
        return args[0]
    return None


# =============================================================================
# Input Conversion
# =============================================================================


def _convert_value(value: Any, target_type: Any) -> Any:
    """Recursively convert a value to its target type.

    Handles:
    - Dataclasses with a from_dict classmethod: delegated to it
    - Plain dataclasses: dict -> dataclass instance
    - Lists: list of dicts -> list of dataclass instances
    - Other types: passed through as-is
    """
    if value is None:
        return None

    item_type = _sequence_item_type(target_type)
    if item_type is not None:
        if isinstance(value, list) and dataclasses.is_dataclass(item_type):
            return [_convert_value(item, item_type) for item in value]
        return value

    if dataclasses.is_dataclass(target_type) and isinstance(target_type, type):
        if not isinstance(value, dict):
            return value
        from_dict = getattr(target_type, "from_dict", None)
        if from_dict is not None:
            return from_dict(value)
        hints = get_type_hints(target_type, include_extras=True)
        converted_kwargs = {}
        for field_name, field_value in value.items():
            if field_name in hints:
                field_type, _ = _unwrap_annotated(hints[field_name])
                converted_kwargs[field_name] = _convert_value(field_value, field_type)
            else:
                converted_kwargs[field_name] = field_value
        return target_type(**converted_kwargs)

    return value


def convert_input(input_dict: dict[str, Any] | None, input_type: type | None) -> Any:
    """Convert a raw dict from the host to a typed dataclass instance.

    Args:
        input_dict: The raw input dict (may be None)
        input_type: The target dataclass type (None for the bare Tool base class)

    Returns:
        A dataclass instance, or None if input_type is None
    """
    if input_type is None:
        return None

    if input_dict is None:
        input_dict = {}

    return _convert_value(input_dict, input_type)


def get_call_input_type(cls: type) -> type:
    """Extract the input type from a Tool's __call__ method's 'input' parameter.

    Raises:
        TypeError: If the annotation is not a dataclass.
    """
    call_method = getattr(cls, "__call__", None)
    if call_method is None:
        raise TypeError(f"{cls.__name__} does not have a __call__ method")

    try:
        hints = get_type_hints(call_method, include_extras=True)
    except Exception:
        raise TypeError(f"{cls.__name__}.__call__ has no valid type annotations")

    if "input" not in hints:
        raise TypeError(f"{cls.__name__}.__call__ has no 'input' annotation")

    input_type: Any = hints["input"]

    if not dataclasses.is_dataclass(input_type):
        raise TypeError(
            f"{cls.__name__}.__call__ input type must be a dataclass, "
            f"got {input_type}"
        )

    return input_type  # type: ignore[no-any-return]


# =============================================================================
# Schema Generation
# =============================================================================

_TYPE_MAP: dict[type, str] = {
    str: "string",
    int: "integer",
    float: "number",
    bool: "boolean",
}


def _get_json_type_for_python_type(py_type: Any) -> dict[str, Any]:
    """Convert a Python type to a JSON schema type definition.

    Handles:
    - Basic types (str, int, float, bool)
    - list[T] and tuple[T, ...] -> {"type": "array", "items": {...}}
    - Nested dataclasses -> recursive schema
    """
    if get_origin(py_type) in (list, tuple):
        item_type = _sequence_item_type(py_type)
        if item_type is None:
            return {"type": "array"}
        if dataclasses.is_dataclass(item_type) and isinstance(item_type, type):
            return {"type": "array", "items": schema_from_dataclass(item_type)}
        return {"type": "array", "items": {"type": _TYPE_MAP.get(item_type, "string")}}

    if dataclasses.is_dataclass(py_type) and isinstance(py_type, type):
        return schema_from_dataclass(py_type)

    return {"type": _TYPE_MAP.get(py_type, "string")}


def schema_from_dataclass(cls: type) -> InputSchemaDict:
    """Generate JSON schema from a dataclass.

    Example:
        @dataclass
        class Input:
            sign: Annotated[str, Desc("An astrological sign like Taurus")]

        schema_from_dataclass(Input)
        # {
        #   "type": "object",
        #   "properties": {
        #     "sign": {"type": "string", "description": "An astrological sign..."}
        #   },
        #   "required": ["sign"],
        #   "additionalProperties": False,
        # }
    """
    hints = get_type_hints(cls, include_extras=True)
    properties = {}
    required = []

    for f in dataclasses.fields(cls):
        py_type, desc = _unwrap_annotated(hints.get(f.name, str))
        prop: dict[str, Any] = _get_json_type_for_python_type(py_type)

        if desc is not None:
            prop["description"] = desc.description
            if desc.min_items is not None:
                prop["minItems"] = desc.min_items
            if desc.max_items is not None:
                prop["maxItems"] = desc.max_items

        properties[f.name] = prop

        if (
            f.default is dataclasses.MISSING
            and f.default_factory is dataclasses.MISSING
        ):
            required.append(f.name)

    return {
        "type": "object",
        "properties": properties,
        "required": required,
        "additionalProperties": False,
    }
