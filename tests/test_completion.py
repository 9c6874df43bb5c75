"""Tests for MistralCompleter - the completion call and its result type."""

from types import SimpleNamespace
from unittest.mock import patch

import pytest

from conftest import TEST_MISTRAL_KEY, make_completion_response
from core.completion import MistralCompleter
from core.models import CompletionFailure, CompletionSuccess


@pytest.fixture
def completion():
    with patch("core.completion.litellm.completion") as mock_completion:
        yield mock_completion


def test_sends_single_user_message_with_fixed_model(settings, completion):
    completion.return_value = make_completion_response("Hello")

    MistralCompleter(settings).complete("the prompt")

    kwargs = completion.call_args.kwargs
    assert kwargs["model"] == "mistral/mistral-large-latest"
    assert kwargs["messages"] == [{"role": "user", "content": "the prompt"}]
    assert kwargs["api_key"] == TEST_MISTRAL_KEY
    assert kwargs["timeout"] == settings.request_timeout


def test_success_returns_every_choice_content(settings, completion):
    completion.return_value = make_completion_response("first", "second")

    outcome = MistralCompleter(settings).complete("p")

    assert outcome == CompletionSuccess(contents=["first", "second"])


def test_zero_choices_is_an_empty_success(settings, completion):
    completion.return_value = make_completion_response()

    assert MistralCompleter(settings).complete("p") == CompletionSuccess(contents=[])


def test_missing_choices_is_an_empty_success(settings, completion):
    completion.return_value = SimpleNamespace(choices=None)

    assert MistralCompleter(settings).complete("p") == CompletionSuccess(contents=[])


def test_provider_error_becomes_failure(settings, completion):
    completion.side_effect = Exception("boom")

    assert MistralCompleter(settings).complete("p") == CompletionFailure(message="boom")


def test_malformed_response_becomes_failure(settings, completion):
    completion.return_value = SimpleNamespace(choices=[SimpleNamespace(text="no message")])

    outcome = MistralCompleter(settings).complete("p")

    assert isinstance(outcome, CompletionFailure)
