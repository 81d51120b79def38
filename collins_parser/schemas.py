"""
Pydantic schemas for everything the parser hands back to its callers.

Data flow:
  classifier → ResponseType tag
  extractors → one payload model per tag (ExplainResponse, ChoiceResponse, ...)
  main.parse → WordResponse, the tagged union of (tag, payload)

Attributes are snake_case in Python; serialization uses the camelCase
names the display layer already consumes (additionalPattern, typeDesc, ...).
Every model is frozen and sequences are tuples: a parse result is never
modified after it is built.
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator, model_validator
from pydantic.alias_generators import to_camel


class ResponseType(str, Enum):
    """The five mutually exclusive page shapes."""
    EXPLAIN = "explain"
    CHOICES = "choices"
    ERROR = "error"
    NON_COLLINS_EXPLAIN = "non_collins_explain"
    MACHINE_TRANSLATION = "machine_translation"


class _Record(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


# --- Shared word metadata ---

class WordInfo(_Record):
    """Headword metadata shown at the top of an entry."""
    word: str = ""
    pronunciation: str = ""
    frequence: Optional[int] = None   # Usage-frequency stars, 1..5
    rank: str = ""                    # Frequency-rank badge, e.g. "CET4"
    additional_pattern: str = ""      # Inflection / pattern note

    @field_validator("frequence")
    @classmethod
    def _frequence_in_range(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and not 1 <= value <= 5:
            raise ValueError(f"frequence must be within 1..5, got {value}")
        return value


# --- Collins entry ---

class MeaningExplain(_Record):
    type: str = ""          # Part-of-speech abbreviation, e.g. "N-COUNT"
    type_desc: str = ""     # Long-form title of the abbreviation
    eng_explain: str = ""   # Markup fragment, links already absolute


class MeaningExample(_Record):
    eng: str = ""
    ch: str = ""


class Meaning(_Record):
    explain: MeaningExplain
    example: MeaningExample


class Synonyms(_Record):
    """
    Synonym cross-references of a Collins entry.

    words and hrefs are parallel sequences: words[i] is the anchor text
    whose link is hrefs[i].
    """
    type: str = ""   # Dialect / register label, e.g. "[美国英语]"
    words: tuple[str, ...] = Field(default_factory=tuple)
    hrefs: tuple[str, ...] = Field(default_factory=tuple)

    @model_validator(mode="after")
    def _parallel(self) -> "Synonyms":
        if len(self.words) != len(self.hrefs):
            raise ValueError(
                f"words and hrefs differ in length ({len(self.words)} != {len(self.hrefs)})"
            )
        return self


class ExplainResponse(_Record):
    word_info: WordInfo
    synonyms: Synonyms = Field(default_factory=Synonyms)
    meanings: tuple[Meaning, ...] = Field(default_factory=tuple)


# --- Homograph choices ---

class Choice(_Record):
    word_type: str = ""   # Empty for a group without a part-of-speech label
    words: tuple[str, ...] = Field(default_factory=tuple)


class ChoiceResponse(_Record):
    choices: tuple[Choice, ...] = Field(default_factory=tuple)


# --- Bare bilingual gloss ---

class NonCollinsExplain(_Record):
    type: str = ""
    explain: str = ""


class NonCollinsExplainsResponse(_Record):
    word_info: WordInfo
    explains: tuple[NonCollinsExplain, ...] = Field(default_factory=tuple)


# --- Machine translation ---

class MachineTranslationResponse(_Record):
    translation: str = ""


# --- Tagged union ---
# Each variant pins its tag with a Literal so pydantic can pick the variant
# from the "type" key alone when validating a serialized message.

class ExplainResult(_Record):
    type: Literal["explain"] = "explain"
    response: ExplainResponse


class ChoicesResult(_Record):
    type: Literal["choices"] = "choices"
    response: ChoiceResponse


class ErrorResult(_Record):
    type: Literal["error"] = "error"


class NonCollinsExplainResult(_Record):
    type: Literal["non_collins_explain"] = "non_collins_explain"
    response: NonCollinsExplainsResponse


class MachineTranslationResult(_Record):
    type: Literal["machine_translation"] = "machine_translation"
    response: MachineTranslationResponse


WordResponse = Annotated[
    Union[
        ExplainResult,
        ChoicesResult,
        ErrorResult,
        NonCollinsExplainResult,
        MachineTranslationResult,
    ],
    Field(discriminator="type"),
]

WORD_RESPONSE_ADAPTER: TypeAdapter = TypeAdapter(WordResponse)


def to_message(result: BaseModel) -> dict:
    """Dump a parse result as the camelCase dict sent to the display layer."""
    return WORD_RESPONSE_ADAPTER.dump_python(result, mode="json", by_alias=True)


def from_message(message: dict):
    """Validate a message dict back into the matching WordResponse variant."""
    return WORD_RESPONSE_ADAPTER.validate_python(message)
