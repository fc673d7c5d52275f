"""
Raw types that directly mirror the JSON printed by ``ichiran-cli -f``.

Nothing is cleaned up here: fields that can be ``[]`` instead of a bool or
string keep both shapes, and the two ways of spelling a word's alternatives
are kept apart. See ichiran_bindings.models for the consumer-facing types.

Document structure::

    [                                   # document
      [                                 # segment (or a plain string)
        [                               # segmentation
          [                             # words
            ["romanized", {info}, []],  # word
            ...
          ],
          score
        ],
        ...
      ],
      ". ",
      ...
    ]

where ``{info}`` is a word info, a compound word info, or
``{"alternative": [info, ...]}``.
"""

import json
import logging
from typing import Annotated, Any, Dict, Iterator, Optional, Tuple, Union

from pydantic import (
    ConfigDict, Discriminator, Field, RootModel, StrictBool, StrictInt, StrictStr, Tag,
    ValidationError, model_validator,
)

from ichiran_bindings.errors import PathItem, SchemaError
from ichiran_bindings.shapes import (
    STRICTNESS_KEY, FlagOrEscape, RawModel, Strictness, TextOrEscape,
    from_array, ordered, wire_keys,
)

logger = logging.getLogger(__name__)


class RawGloss(RawModel):
    pos: StrictStr
    gloss: StrictStr
    field: Optional[StrictStr] = None
    info: Optional[StrictStr] = None


class RawConjProp(RawModel):
    pos: StrictStr
    prop_type: TextOrEscape = Field(alias="type")
    fml: StrictBool = False
    neg: StrictBool = False


class RawConj(RawModel):
    """A conjugation record. ``via`` entries share the same shape."""
    prop: Annotated[Tuple[RawConjProp, ...], Field(min_length=1)]
    via: Tuple["RawConj", ...] = ()
    reading: Optional[StrictStr] = None
    gloss: Tuple[RawGloss, ...] = ()
    readok: FlagOrEscape


class RawCounter(RawModel):
    value: StrictStr
    ordinal: FlagOrEscape


class RawWordInfo(RawModel):
    reading: StrictStr
    text: StrictStr
    kana: StrictStr
    score: StrictInt
    counter: Optional[RawCounter] = None
    seq: Optional[StrictInt] = None
    gloss: Tuple[RawGloss, ...] = ()
    suffix: Optional[StrictStr] = None
    conj: Tuple[RawConj, ...] = ()


class RawCompoundWordInfo(RawModel):
    reading: StrictStr
    text: StrictStr
    kana: StrictStr
    score: StrictInt
    compound: Tuple[StrictStr, ...]
    components: Tuple[RawWordInfo, ...]


def alternative_shape(value: Any) -> str:
    """Compound infos are the only objects carrying a ``compound`` key."""
    if isinstance(value, dict):
        return "compound_word_info" if "compound" in value else "word_info"
    if isinstance(value, RawCompoundWordInfo):
        return "compound_word_info"
    return "word_info"


RawAlternative = Annotated[
    Union[
        Annotated[RawWordInfo, Tag("word_info")],
        Annotated[RawCompoundWordInfo, Tag("compound_word_info")],
    ],
    Discriminator(alternative_shape),
]


class RawAlternativeList(RawModel):
    """The wrapped form: ``{"alternative": [info, ...]}``."""
    alternative: Annotated[Tuple[RawAlternative, ...], Field(min_length=1)]


# A single info object is tried before the wrapped list
RawAlternatives = ordered(RawAlternative, RawAlternativeList)


class RawWord(RawModel):
    """``[romanized, alternatives, trailing]``"""
    romanized: StrictStr
    alternatives: RawAlternatives
    # Never interpreted; always empty in practice
    trailing: Tuple[Any, ...]

    @model_validator(mode="before")
    @classmethod
    def from_wire_array(cls, data: Any) -> Any:
        return from_array(data, ("romanized", "alternatives", "trailing"))


class RawSegmentation(RawModel):
    """``[words, score]``"""
    words: Tuple[RawWord, ...]
    score: StrictInt

    @model_validator(mode="before")
    @classmethod
    def from_wire_array(cls, data: Any) -> Any:
        return from_array(data, ("words", "score"))


# Passthrough text (punctuation etc.) is tried before segmentations
RawSegment = ordered(
    StrictStr,
    Annotated[Tuple[RawSegmentation, ...], Field(min_length=1)],
)


class RawDocument(RootModel[Tuple[RawSegment, ...]]):
    """A whole ``ichiran-cli -f`` document."""
    model_config = ConfigDict(frozen=True)

    def __iter__(self) -> Iterator[Union[str, Tuple[RawSegmentation, ...]]]:
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> Union[str, Tuple[RawSegmentation, ...]]:
        return self.root[index]


RawConj.model_rebuild()


# Every key that can appear on the wire, plus the names given to positional
# record slots. Anything else in a pydantic error location is a union label.
_PATH_KEYS = frozenset().union(
    *(wire_keys(model) for model in (
        RawGloss, RawConjProp, RawConj, RawCounter, RawWordInfo,
        RawCompoundWordInfo, RawAlternativeList, RawWord, RawSegmentation,
    ))
)


def _error_path(error: Dict[str, Any]) -> Tuple[PathItem, ...]:
    path = [p for p in error["loc"] if isinstance(p, int) or p in _PATH_KEYS]
    if error["type"] == "unknown_field":
        path.append(error["ctx"]["field"])
    return tuple(path)


def _schema_error(exc: ValidationError) -> SchemaError:
    """
    Build a SchemaError from a validation failure.

    When several shapes were tried, the error that got deepest into the
    document wins; on a tie the shape tried first wins.
    """
    errors = exc.errors(include_url=False)
    located = [(_error_path(e), e) for e in errors]
    path, deepest = max(located, key=lambda item: len(item[0]))
    return SchemaError(path, deepest["msg"], errors)


def decode_structured(
    text: str,
    strictness: Union[Strictness, str, None] = None,
) -> RawDocument:
    """
    Decode the output of ``ichiran-cli -f``.

    Args:
        text: The full JSON document.
        strictness: "strict" rejects unknown object keys, "lenient" ignores
            them. Defaults to settings.STRICTNESS.

    Returns:
        The raw document, mirroring the wire format exactly.

    Raises:
        SchemaError: If the text is not JSON or does not match the schema.
            ``error.path`` locates the failure.
    """
    strictness = Strictness.coerce(strictness)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SchemaError((), f"invalid JSON: {e}") from e

    try:
        return RawDocument.model_validate(data, context={STRICTNESS_KEY: strictness})
    except ValidationError as e:
        error = _schema_error(e)
        logger.debug(f"Schema error ({strictness.value}) at {error}")
        raise error from e
