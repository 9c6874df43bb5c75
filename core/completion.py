# =============================================================================
# core/completion.py  -  The completion call (Mistral via LiteLLM)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Sends the composed prompt to the hosted model as ONE user-role message
#   and reports the outcome as a value:
#     - CompletionSuccess(contents=[...])  one entry per returned choice
#     - CompletionFailure(message="...")   the call or its response was bad
#
# LiteLLM routes "mistral/<model>" to Mistral's chat completions API, the
# same adapter the console agent uses through Google ADK's LiteLlm wrapper.
#
# No retries.  A failed attempt is final for that invocation.
# =============================================================================

import logging

import litellm

from core.config import Settings
from core.models import CompletionFailure, CompletionOutcome, CompletionSuccess

logger = logging.getLogger(__name__)


class MistralCompleter:
    """Runs a single-message chat completion against the configured model."""

    def __init__(self, settings: Settings):
        self._model = settings.model
        self._api_key = settings.mistral_api_key
        self._timeout = settings.request_timeout

    def complete(self, prompt: str) -> CompletionOutcome:
        try:
            response = litellm.completion(
                model=self._model,
                messages=[{"role": "user", "content": prompt}],
                api_key=self._api_key,
                timeout=self._timeout,
            )
            # A response without choices is "empty", not malformed.
            choices = response.choices or []
            contents = [choice.message.content for choice in choices]
        except Exception as e:
            # Provider, auth, network and response-shape errors all land
            # here.  The caller turns the message into response text.
            logger.error("Completion call to %s failed: %s", self._model, e)
            return CompletionFailure(message=str(e))

        return CompletionSuccess(contents=contents)
