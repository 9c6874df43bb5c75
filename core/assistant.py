# =============================================================================
# core/assistant.py  -  The Query Orchestrator behind get-avs-list
# =============================================================================
#
# THE FLOW (one linear pass per invocation):
#
#     ToolRequest
#         │
#         ▼
#     AvsClient.fetch()            never fails; [] when the registry is down
#         │
#         ▼
#     build_avs_prompt(...)        dataset + query + AVS name
#         │
#         ▼
#     MistralCompleter.complete()  CompletionSuccess | CompletionFailure
#         │
#         ▼
#     ToolResponse                 exactly one text item, always
#
# RESPONSE TEXT:
#   failure        → "Error fetching AVS data <message>"
#   zero choices   → "No response from EigenLayer AVS data assistant"
#   otherwise      → first choice's content, untouched
#
# AvsAssistant holds only its two collaborators.  Everything produced while
# answering a request is a local variable, so concurrent invocations served
# by the same instance cannot see each other's data.
# =============================================================================

import logging

from core.avs import AvsClient
from core.completion import MistralCompleter
from core.config import Settings
from core.models import CompletionFailure, ToolRequest, ToolResponse
from core.prompt import build_avs_prompt

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Error fetching AVS data "
NO_RESPONSE_TEXT = "No response from EigenLayer AVS data assistant"


class AvsAssistant:
    """Answers questions about the AVS registry with the help of an LLM."""

    def __init__(self, fetcher: AvsClient, completer: MistralCompleter):
        self._fetcher = fetcher
        self._completer = completer

    @classmethod
    def from_settings(cls, settings: Settings) -> "AvsAssistant":
        return cls(AvsClient(settings), MistralCompleter(settings))

    def handle(self, request: ToolRequest) -> ToolResponse:
        """Answer one get-avs-list call.  Never raises."""
        try:
            dataset = self._fetcher.fetch()
            if dataset.degraded:
                logger.info("Continuing with an empty AVS dataset (%s)", dataset.error)

            prompt = build_avs_prompt(dataset.records, request.full_prompt, request.avs_name)
            outcome = self._completer.complete(prompt)
        except Exception as e:
            logger.exception("Unexpected error while answering AVS query")
            return ToolResponse.text(f"{ERROR_PREFIX}{e}")

        if isinstance(outcome, CompletionFailure):
            return ToolResponse.text(f"{ERROR_PREFIX}{outcome.message}")

        if not outcome.contents:
            return ToolResponse.text(NO_RESPONSE_TEXT)

        return ToolResponse.text(f"{outcome.contents[0]}")
