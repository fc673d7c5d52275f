"""
Pydantic models for decoded ichiran-cli output.

These are the consumer-facing types. Compared to ichiran_bindings.raw:

- ``[]`` placeholders are gone: flags become False, strings become None.
- A word always has a tuple of alternatives, however ichiran spelled it.
- Segments and alternatives carry a ``kind`` tag, so JSON dumps keep the
  variant.

Usage:
    from ichiran_bindings.raw import decode_structured
    from ichiran_bindings.models import normalize

    doc = normalize(decode_structured(stdout))
    for segment in doc:
        if isinstance(segment, Segmentations):
            for word in segment.best.words:
                print(word.romanized, word.alternatives[0].text)
"""

from typing import Annotated, Iterator, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from ichiran_bindings.raw import (
    RawAlternativeList, RawCompoundWordInfo, RawConj, RawConjProp, RawCounter,
    RawDocument, RawGloss, RawSegmentation, RawWord, RawWordInfo,
)
from ichiran_bindings.shapes import resolve_flag, resolve_text


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


# =============================================================================
# Glosses and Conjugations
# =============================================================================

class Gloss(FrozenModel):
    """A dictionary sense."""
    pos: str = Field(..., description="Part of speech, e.g. '[n,vs,vt]'")
    gloss: str = Field(..., description="Meaning")
    field: Optional[str] = Field(None, description="Field of application, e.g. 'comp'")
    info: Optional[str] = Field(None, description="Usage note")

    @classmethod
    def from_raw(cls, raw: RawGloss) -> "Gloss":
        return cls(pos=raw.pos, gloss=raw.gloss, field=raw.field, info=raw.info)


class ConjProp(FrozenModel):
    """Grammatical properties of one conjugation step."""
    pos: str
    prop_type: Optional[str] = Field(None, description="Conjugation type, e.g. 'Past (~ta)'")
    fml: bool = Field(False, description="Formal / polite form")
    neg: bool = Field(False, description="Negative form")

    @classmethod
    def from_raw(cls, raw: RawConjProp) -> "ConjProp":
        return cls(
            pos=raw.pos,
            prop_type=resolve_text(raw.prop_type),
            fml=raw.fml,
            neg=raw.neg,
        )


class Conj(FrozenModel):
    """
    How a surface form derives from its dictionary form.

    ``via`` holds the intermediate derivations of a chained conjugation
    (e.g. causative then passive), each with the same structure.
    """
    prop: Tuple[ConjProp, ...]
    via: Tuple["Conj", ...] = ()
    reading: Optional[str] = Field(None, description="Dictionary form reading")
    gloss: Tuple[Gloss, ...] = ()
    readok: bool = False

    @classmethod
    def from_raw(cls, raw: RawConj) -> "Conj":
        return cls(
            prop=tuple(ConjProp.from_raw(p) for p in raw.prop),
            via=tuple(cls.from_raw(v) for v in raw.via),
            reading=raw.reading,
            gloss=tuple(Gloss.from_raw(g) for g in raw.gloss),
            readok=resolve_flag(raw.readok),
        )


class Counter(FrozenModel):
    """Counter-word metadata, e.g. 三匹 -> value 'Value: 3'."""
    value: str
    ordinal: bool = False

    @classmethod
    def from_raw(cls, raw: RawCounter) -> "Counter":
        return cls(value=raw.value, ordinal=resolve_flag(raw.ordinal))


# =============================================================================
# Word Infos
# =============================================================================

class WordInfo(FrozenModel):
    """A simple or suffixed word."""
    kind: Literal["word"] = "word"
    reading: str = Field(..., description="Text with furigana, e.g. '一覧 【いちらん】'")
    text: str = Field(..., description="Surface text")
    kana: str = Field(..., description="Kana reading")
    score: int
    counter: Optional[Counter] = None
    seq: Optional[int] = Field(None, description="JMdict sequence number")
    gloss: Tuple[Gloss, ...] = ()
    suffix: Optional[str] = None
    conj: Tuple[Conj, ...] = ()

    @classmethod
    def from_raw(cls, raw: RawWordInfo) -> "WordInfo":
        return cls(
            reading=raw.reading,
            text=raw.text,
            kana=raw.kana,
            score=raw.score,
            counter=Counter.from_raw(raw.counter) if raw.counter is not None else None,
            seq=raw.seq,
            gloss=tuple(Gloss.from_raw(g) for g in raw.gloss),
            suffix=raw.suffix,
            conj=tuple(Conj.from_raw(c) for c in raw.conj),
        )


class CompoundWordInfo(FrozenModel):
    """A word made of several morphemes, e.g. 食べています."""
    kind: Literal["compound"] = "compound"
    reading: str
    text: str
    kana: str
    score: int
    compound: Tuple[str, ...] = Field(..., description="Surface text of each member")
    components: Tuple[WordInfo, ...]

    @classmethod
    def from_raw(cls, raw: RawCompoundWordInfo) -> "CompoundWordInfo":
        return cls(
            reading=raw.reading,
            text=raw.text,
            kana=raw.kana,
            score=raw.score,
            compound=raw.compound,
            components=tuple(WordInfo.from_raw(c) for c in raw.components),
        )


Alternative = Annotated[Union[WordInfo, CompoundWordInfo], Field(discriminator="kind")]


def _alternative(raw: Union[RawWordInfo, RawCompoundWordInfo]) -> Union[WordInfo, CompoundWordInfo]:
    if isinstance(raw, RawCompoundWordInfo):
        return CompoundWordInfo.from_raw(raw)
    return WordInfo.from_raw(raw)


def flatten_alternatives(raw) -> Tuple[Union[WordInfo, CompoundWordInfo], ...]:
    """A single info becomes a one-element tuple; a wrapped list keeps its order."""
    if isinstance(raw, RawAlternativeList):
        return tuple(_alternative(a) for a in raw.alternative)
    return (_alternative(raw),)


# =============================================================================
# Words and Segments
# =============================================================================

class Word(FrozenModel):
    romanized: str
    alternatives: Tuple[Alternative, ...] = Field(
        ..., description="Readings ichiran could not decide between, best first"
    )

    @classmethod
    def from_raw(cls, raw: RawWord) -> "Word":
        return cls(romanized=raw.romanized, alternatives=flatten_alternatives(raw.alternatives))


class Segmentation(FrozenModel):
    """One candidate split of a segment into words."""
    words: Tuple[Word, ...]
    score: int = Field(..., description="Higher is more likely")

    @classmethod
    def from_raw(cls, raw: RawSegmentation) -> "Segmentation":
        return cls(words=tuple(Word.from_raw(w) for w in raw.words), score=raw.score)


class Segmentations(FrozenModel):
    """Japanese text: candidate segmentations in ichiran's ranking order."""
    kind: Literal["segmentations"] = "segmentations"
    segmentations: Tuple[Segmentation, ...]

    @property
    def best(self) -> Segmentation:
        return self.segmentations[0]


class Other(FrozenModel):
    """Text passed through unanalyzed (punctuation, latin text, ...)."""
    kind: Literal["other"] = "other"
    text: str


Segment = Annotated[Union[Segmentations, Other], Field(discriminator="kind")]


class Document(FrozenModel):
    """A decoded ``ichiran-cli -f`` document."""
    segments: Tuple[Segment, ...] = ()

    @classmethod
    def from_raw(cls, raw: RawDocument) -> "Document":
        segments: List[Union[Segmentations, Other]] = []
        for segment in raw:
            if isinstance(segment, str):
                segments.append(Other(text=segment))
            else:
                segments.append(Segmentations(
                    segmentations=tuple(Segmentation.from_raw(s) for s in segment)
                ))
        return cls(segments=tuple(segments))

    def __iter__(self) -> Iterator[Union[Segmentations, Other]]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def __getitem__(self, index: int) -> Union[Segmentations, Other]:
        return self.segments[index]

    @property
    def text(self) -> str:
        """Surface text along the best segmentation of every segment."""
        parts = []
        for segment in self.segments:
            if isinstance(segment, Other):
                parts.append(segment.text)
            else:
                parts.extend(w.alternatives[0].text for w in segment.best.words)
        return "".join(parts)


Conj.model_rebuild()


def normalize(raw: RawDocument) -> Document:
    """Project a raw document onto the normalized model. Never fails."""
    return Document.from_raw(raw)


# =============================================================================
# Romanization With Info (ichiran-cli -i)
# =============================================================================

class RomanizedWithInfoEntry(FrozenModel):
    word: str = Field(..., description="Header line, e.g. '* ichiran  一覧 【いちらん】'")
    alternatives: Tuple[str, ...] = Field((), description="Gloss and conjugation lines")


class RomanizedWithInfo(FrozenModel):
    romanized: str
    entries: Tuple[RomanizedWithInfoEntry, ...] = ()
