"""
Shape primitives for decoding ichiran-cli JSON.

ichiran-cli is written in Lisp and serializes NIL as an empty array, so
several fields that are normally a boolean or a string show up as ``[]``
when the value does not apply. Other parts of the document have no type tag
at all and are told apart only by their shape.

This module provides the building blocks used by the raw schema:

- Strictness: whether unknown object keys are rejected or ignored.
- Escape types: ``bool | []`` and ``str | []`` fields.
- Ordered unions: try candidate shapes left to right, first match wins.
- RawModel: frozen pydantic base that enforces the strictness option.
"""

from enum import Enum
from functools import lru_cache
from typing import Annotated, Any, Dict, FrozenSet, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, ValidationInfo, model_validator
from pydantic_core import PydanticCustomError

from ichiran_bindings import settings


class Strictness(str, Enum):
    """How the structured decoder treats object keys it does not know."""
    STRICT = "strict"
    LENIENT = "lenient"

    @classmethod
    def coerce(cls, value: Union["Strictness", str, None]) -> "Strictness":
        """Resolve None to the configured default and strings to members."""
        if value is None:
            value = settings.STRICTNESS
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(
                f"Unknown strictness {value!r} (expected 'strict' or 'lenient')"
            ) from None


# Context key carried through pydantic validation
STRICTNESS_KEY = "strictness"


def ordered(*shapes: Any) -> Any:
    """
    Union of shapes tried strictly left to right.

    The first shape that validates wins, even if a later one would also
    match. Validation fails only when every shape fails.
    """
    return Annotated[Union[shapes], Field(union_mode="left_to_right")]


# The escape shape: an array that must be empty
EscapeArray = Tuple[()]


# A boolean, or [] meaning "not applicable"
FlagOrEscape = ordered(StrictBool, EscapeArray)


# A string, or [] meaning "not applicable"
TextOrEscape = ordered(StrictStr, EscapeArray)


def resolve_flag(value: Union[bool, Tuple[()]]) -> bool:
    """Collapse a FlagOrEscape value. The escape shape resolves to False."""
    if isinstance(value, bool):
        return value
    return False


def resolve_text(value: Union[str, Tuple[()]]) -> Optional[str]:
    """Collapse a TextOrEscape value. The escape shape resolves to None."""
    if isinstance(value, str):
        return value
    return None


def from_array(data: Any, names: Sequence[str]) -> Dict[str, Any]:
    """
    Map a fixed-length JSON array onto named fields.

    Raises ValueError if data is not an array of exactly len(names) items.
    """
    if not isinstance(data, (list, tuple)):
        raise ValueError(f"expected an array of {len(names)} elements")
    if len(data) != len(names):
        raise ValueError(
            f"expected an array of {len(names)} elements, got {len(data)}"
        )
    return dict(zip(names, data))


@lru_cache(maxsize=None)
def wire_keys(model: type) -> FrozenSet[str]:
    """Keys a model accepts on the wire (aliases where defined)."""
    return frozenset(
        info.alias or name for name, info in model.model_fields.items()
    )


@lru_cache(maxsize=None)
def required_wire_keys(model: type) -> Tuple[str, ...]:
    return tuple(
        info.alias or name
        for name, info in model.model_fields.items()
        if info.is_required()
    )


class RawModel(BaseModel):
    """
    Base for every raw wire object.

    An object missing a required key fails at the object itself with error
    type ``missing_field``, so a wrong shape in an ordered union reports a
    shallower error than the right shape with a real problem.

    Unknown keys are ignored, unless validation runs with
    ``context={"strictness": Strictness.STRICT}``, in which case the first
    unknown key fails validation with error type ``unknown_field``.
    """
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def check_wire_keys(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, dict):
            return data
        for key in required_wire_keys(cls):
            if key not in data:
                raise PydanticCustomError(
                    "missing_field",
                    "Missing field {field} for {model}",
                    {"field": key, "model": cls.__name__},
                )
        context = info.context or {}
        if Strictness.coerce(context.get(STRICTNESS_KEY)) is not Strictness.STRICT:
            return data
        known = wire_keys(cls)
        for key in data:
            if key not in known:
                raise PydanticCustomError(
                    "unknown_field",
                    "Unknown field {field} for {model}",
                    {"field": key, "model": cls.__name__},
                )
        return data
