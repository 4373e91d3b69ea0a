"""
Core data structures for the question/answer exchange.

This module defines the dataclasses passed between the validator, the
request transport, the presenter and the normalizer, together with the
TypedDicts describing their JSON wire forms.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Annotated, Literal, NotRequired, TypeAlias, TypedDict

from .errors import InvalidSpec, PresenterFailed
from .schema import Desc

# =============================================================================
# JSON Type Aliases
# =============================================================================

JSONValue: TypeAlias = (
    str | int | float | bool | None | list["JSONValue"] | dict[str, "JSONValue"]
)

JSONObject: TypeAlias = dict[str, JSONValue]

# Single-select answers are a label, multi-select answers a list of labels
AnswerValue: TypeAlias = str | list[str]

ResponseStatus: TypeAlias = Literal["selected", "cancelled"]
AskStatus: TypeAlias = Literal["selected", "cancelled", "error"]

# Marks a free-text "Other" entry in selected_index
CUSTOM_ANSWER_INDEX = -1

# Bounds of a question batch
MIN_QUESTIONS = 1
MAX_QUESTIONS = 4
MIN_OPTIONS = 2
MAX_OPTIONS = 4
MAX_HEADER_LENGTH = 12


# =============================================================================
# Serialization TypedDicts
# =============================================================================


class TextContentDict(TypedDict):
    """Serialized form of TextContent."""

    type: str
    text: str


class QuestionOptionDict(TypedDict):
    """Serialized form of QuestionOption."""

    label: str
    description: str


class QuestionDict(TypedDict):
    """Serialized form of Question (request file format)."""

    question: str
    header: str
    options: list[QuestionOptionDict]
    multiSelect: bool


class RequestDict(TypedDict):
    """Top-level request file document."""

    questions: list[QuestionDict]


class QuestionAnswerDict(TypedDict):
    """One answer as reported by the presenter."""

    question: str
    header: str
    selected: NotRequired[AnswerValue]
    selected_index: NotRequired[int | list[int]]


class BinaryResponseDict(TypedDict):
    """Document the presenter prints on stdout."""

    status: ResponseStatus
    answers: list[QuestionAnswerDict]


class AskResultDict(TypedDict):
    """Serialized form of AskResult (the tool result)."""

    status: AskStatus
    answers: dict[str, AnswerValue]
    raw: NotRequired[list[QuestionAnswerDict]]
    error: NotRequired[str]


# =============================================================================
# Content
# =============================================================================


@dataclass(frozen=True)
class TextContent:
    """Plain text content block."""

    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise TypeError(f"text must be str, got {type(self.text).__name__}")

    def to_dict(self) -> TextContentDict:
        return {"type": "text", "text": self.text}


# =============================================================================
# Questions (request side)
# =============================================================================


def _require_str(data: Mapping[str, object], key: str, where: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise InvalidSpec(f"{where}: '{key}' must be a string")
    return value


@dataclass(frozen=True)
class QuestionOption:
    """A single selectable choice."""

    label: Annotated[str, Desc("The display text for this option (1-5 words)")]
    description: Annotated[str, Desc("Explanation of what this option means")] = ""

    def to_dict(self) -> QuestionOptionDict:
        return {"label": self.label, "description": self.description}

    @classmethod
    def from_dict(
        cls, data: Mapping[str, object], where: str = "option"
    ) -> "QuestionOption":
        if not isinstance(data, Mapping):
            raise InvalidSpec(f"{where}: expected an object")
        description = data.get("description", "")
        if not isinstance(description, str):
            raise InvalidSpec(f"{where}: 'description' must be a string")
        return cls(label=_require_str(data, "label", where), description=description)


@dataclass(frozen=True)
class Question:
    """A multiple-choice question.

    The presenter always offers an extra free-text "Other" choice, so it is
    never part of `options`.
    """

    question: Annotated[
        str,
        Desc(
            "The complete question to ask the user. Should be clear, specific, "
            "and end with a question mark"
        ),
    ]
    header: Annotated[
        str, Desc("Very short label displayed as a chip/tag (max 12 chars)")
    ]
    options: Annotated[
        tuple[QuestionOption, ...],
        Desc(
            "The available choices (2-4 options). No 'Other' option needed, "
            "it is added automatically",
            min_items=MIN_OPTIONS,
            max_items=MAX_OPTIONS,
        ),
    ]
    multiSelect: Annotated[
        bool, Desc("Set to true to allow multiple selections")
    ]

    @property
    def key(self) -> str:
        """Key under which this question's answer is reported."""
        return self.header or self.question

    def to_dict(self) -> QuestionDict:
        return {
            "question": self.question,
            "header": self.header,
            "options": [o.to_dict() for o in self.options],
            "multiSelect": self.multiSelect,
        }

    @classmethod
    def from_dict(
        cls, data: Mapping[str, object], where: str = "question"
    ) -> "Question":
        if not isinstance(data, Mapping):
            raise InvalidSpec(f"{where}: expected an object")
        options = data.get("options")
        if not isinstance(options, Sequence) or isinstance(options, str):
            raise InvalidSpec(f"{where}: 'options' must be a list")
        if "multiSelect" not in data:
            raise InvalidSpec(f"{where}: 'multiSelect' is required")
        multi_select = data["multiSelect"]
        if not isinstance(multi_select, bool):
            raise InvalidSpec(f"{where}: 'multiSelect' must be a boolean")
        return cls(
            question=_require_str(data, "question", where),
            header=_require_str(data, "header", where),
            options=tuple(
                QuestionOption.from_dict(o, f"{where}.options[{i}]")
                for i, o in enumerate(options)
            ),
            multiSelect=multi_select,
        )


# =============================================================================
# Answers (response side)
# =============================================================================


@dataclass(frozen=True)
class QuestionAnswer:
    """One answer reported by the presenter.

    `selected` is None when the user skipped the question.
    """

    question: str
    header: str
    selected: AnswerValue | None = None
    selected_index: int | list[int] | None = None

    @property
    def key(self) -> str:
        """Key under which this answer is reported."""
        return self.header or self.question

    @property
    def custom_text(self) -> str | None:
        """Free-text "Other" answer, if the user typed one."""
        if self.selected is None or self.selected_index is None:
            return None
        if isinstance(self.selected, list) and isinstance(self.selected_index, list):
            for label, index in zip(self.selected, self.selected_index):
                if index == CUSTOM_ANSWER_INDEX:
                    return label
            return None
        if self.selected_index == CUSTOM_ANSWER_INDEX:
            return str(self.selected)
        return None

    def to_dict(self) -> QuestionAnswerDict:
        result: QuestionAnswerDict = {"question": self.question, "header": self.header}
        if self.selected is not None:
            result["selected"] = self.selected
        if self.selected_index is not None:
            result["selected_index"] = self.selected_index
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> "QuestionAnswer":
        question = data.get("question")
        header = data.get("header")
        selected = data.get("selected")
        selected_index = data.get("selected_index")
        return cls(
            question=question if isinstance(question, str) else "",
            header=header if isinstance(header, str) else "",
            selected=selected,  # type: ignore[arg-type]
            selected_index=selected_index,  # type: ignore[arg-type]
        )


@dataclass(frozen=True)
class RawOutcome:
    """Terminal outcome of one presenter run."""

    stdout: str
    stderr: str
    exit_code: int

    def raise_for_status(self) -> None:
        """Raise PresenterFailed if the presenter exited with a diagnostic.

        A non-zero exit with an empty stderr is tolerated: some presenters
        exit non-zero when the dialog is closed without writing anything.
        """
        if self.exit_code != 0 and self.stderr:
            raise PresenterFailed(self.exit_code, self.stderr)


@dataclass
class AskResult:
    """Normalized result of one exchange, returned to the caller."""

    status: AskStatus
    answers: dict[str, AnswerValue] = field(default_factory=dict)
    raw: list[QuestionAnswerDict] | None = None
    error: str | None = None

    @classmethod
    def cancelled(cls) -> "AskResult":
        return cls(status="cancelled")

    @classmethod
    def failure(cls, message: str) -> "AskResult":
        return cls(status="error", error=message or "Unknown error")

    @property
    def answer_objects(self) -> list[QuestionAnswer]:
        """The raw answer list as typed objects, in presenter order."""
        return [QuestionAnswer.from_dict(a) for a in self.raw or []]

    def to_dict(self) -> AskResultDict:
        result: AskResultDict = {"status": self.status, "answers": dict(self.answers)}
        if self.raw is not None:
            result["raw"] = self.raw
        if self.error is not None:
            result["error"] = self.error
        return result
