"""Data models for Wordnik requests.

An ApiRequest pairs an Endpoint (the REST path) with an ordered list of
query parameters. Parameter values form a closed union: every value a
facade can send is one of TextValue, IntValue, FlagValue or TagValue, and
each knows how to render itself as query-string text.
"""

from enum import Enum
from typing import Annotated, Literal, Union
from urllib.parse import quote

from pydantic import BaseModel, Field, StrictBool, StrictInt, model_validator

from .errors import ParamTypeError

TAG_MARKER = ":"


class PartOfSpeech(str, Enum):
    NOUN = "noun"
    ADJECTIVE = "adjective"
    VERB = "verb"
    ADVERB = "adverb"
    INTERJECTION = "interjection"
    PRONOUN = "pronoun"
    PREPOSITION = "preposition"
    ABBREVIATION = "abbreviation"
    AFFIX = "affix"
    ARTICLE = "article"
    AUXILIARY_VERB = "auxiliary-verb"
    CONJUNCTION = "conjunction"
    DEFINITE_ARTICLE = "definite-article"
    IDIOM = "idiom"
    IMPERATIVE = "imperative"
    NOUN_PLURAL = "noun-plural"
    NOUN_POSSESSIVE = "noun-posessive"
    PAST_PARTICIPLE = "past-participle"
    PHRASAL_PREFIX = "phrasal-prefix"
    PROPER_NOUN = "proper-noun"
    PROPER_NOUN_PLURAL = "proper-noun-plural"
    SUFFIX = "suffix"
    VERB_INTRANSITIVE = "verb-intransitive"
    VERB_TRANSITIVE = "verb-transitive"


class RelationType(str, Enum):
    SYNONYM = "synonym"
    ANTONYM = "antonym"
    VARIANT = "variant"
    EQUIVALENT = "equivalent"
    CROSS_REFERENCE = "cross-reference"
    RELATED_WORD = "related-word"
    RHYME = "rhyme"
    FORM = "form"
    ETYMOLOGICALLY_RELATED_TERM = "etymologically-related-term"
    HYPERNYM = "hypernym"
    HYPONYM = "hyponym"
    INFLECTED_FORM = "inflected-form"
    PRIMARY = "primary"
    SAME_CONTEXT = "same-context"
    VERB_FORM = "verb-form"
    VERB_STEM = "verb-stem"
    HAS_TOPIC = "has_topic"


class TextValue(BaseModel):
    """A plain string, sent unchanged."""

    kind: Literal["text"] = "text"
    value: str

    def render(self) -> str:
        return self.value


class IntValue(BaseModel):
    kind: Literal["int"] = "int"
    value: StrictInt

    def render(self) -> str:
        return str(self.value)


class FlagValue(BaseModel):
    """A boolean, sent as the literal ``true`` or ``false``."""

    kind: Literal["flag"] = "flag"
    value: StrictBool

    def render(self) -> str:
        return "true" if self.value else "false"


class TagValue(BaseModel):
    """An enumerated literal such as ``:useSuggest``; rendered without its marker."""

    kind: Literal["tag"] = "tag"
    name: str

    def render(self) -> str:
        if self.name.startswith(TAG_MARKER):
            return self.name[len(TAG_MARKER):]
        return self.name


ParamValue = Annotated[
    Union[TextValue, IntValue, FlagValue, TagValue],
    Field(discriminator="kind"),
]


def to_param_value(raw) -> TextValue | IntValue | FlagValue | TagValue:
    """Coerce a Python value into the parameter union.

    bool is checked before int since bool is an int subclass, and Enum
    members before str since the enums here are str subclasses.
    """
    if isinstance(raw, (TextValue, IntValue, FlagValue, TagValue)):
        return raw
    if isinstance(raw, Enum):
        return TagValue(name=str(raw.value))
    if isinstance(raw, bool):
        return FlagValue(value=raw)
    if isinstance(raw, int):
        return IntValue(value=raw)
    if isinstance(raw, str):
        return TextValue(value=raw)
    raise ParamTypeError(f"Unsupported parameter value {raw!r} ({type(raw).__name__})")


class Endpoint(BaseModel):
    """Names the REST path ``/api/{type}.json/{id}/{field}``."""

    type: str
    id: str | None = None
    field: str | None = None

    @model_validator(mode="after")
    def _field_requires_id(self):
        if self.field is not None and self.id is None:
            raise ValueError(f"endpoint field '{self.field}' requires an id")
        return self

    @property
    def path(self) -> str:
        path = f"/api/{self.type}.json/{quote(self.id or '', safe='')}"
        if self.field:
            path += f"/{self.field}"
        return path


class ApiRequest(BaseModel):
    """One GET against Wordnik: an endpoint and its caller-supplied parameters."""

    endpoint: Endpoint
    params: list[tuple[str, ParamValue]] = []

    def rendered_params(self) -> list[tuple[str, str]]:
        return [(name, value.render()) for name, value in self.params]
