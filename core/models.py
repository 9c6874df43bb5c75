# =============================================================================
# core/models.py  -  Data Models for one tool invocation
# =============================================================================
#
# Everything here is request-scoped: created when a get-avs-list call comes
# in, thrown away once the response has been written.  Nothing is shared
# between invocations.
#
# The two result types (AvsDataset and CompletionSuccess/CompletionFailure)
# describe the outcome of each external call.  A failed fetch is still an
# AvsDataset (with empty records), and a failed completion is a value, not
# an exception.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Optional, Union


# -----------------------------------------------------------------------------
# ToolRequest - the arguments of a get-avs-list call
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolRequest:
    """The validated arguments of one get-avs-list invocation."""

    full_prompt: str                   # "fullPrompt" on the wire
    avs_name: Optional[str] = None     # "avsName" on the wire, may be omitted


# -----------------------------------------------------------------------------
# AvsDataset - what the registry gave us (or the empty fallback)
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class AvsDataset:
    """Parsed JSON body of the AVS registry endpoint.

    ``records`` is whatever the endpoint returned, unvalidated.  When the
    fetch failed, ``records`` is an empty list and ``error`` says why.
    """

    records: Any = field(default_factory=list)
    error: Optional[str] = None

    @property
    def degraded(self) -> bool:
        return self.error is not None


# -----------------------------------------------------------------------------
# Completion outcome - success with N choices, or failure with a message
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class CompletionSuccess:
    """The message content of every choice the model returned, in order."""

    contents: list = field(default_factory=list)


@dataclass(frozen=True)
class CompletionFailure:
    """The completion call did not produce a usable response."""

    message: str


CompletionOutcome = Union[CompletionSuccess, CompletionFailure]


# -----------------------------------------------------------------------------
# ToolResponse - the MCP content envelope
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class TextItem:
    text: str
    type: str = "text"


@dataclass(frozen=True)
class ToolResponse:
    """``{"content": [{"type": "text", "text": ...}]}``"""

    content: tuple[TextItem, ...]

    @classmethod
    def text(cls, text: str) -> "ToolResponse":
        return cls(content=(TextItem(text=text),))

    @property
    def first_text(self) -> str:
        return self.content[0].text
