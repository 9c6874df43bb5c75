"""Shared fixtures and fakes for the AVS assistant tests."""

from types import SimpleNamespace

import pytest

from core.config import Settings
from core.models import AvsDataset, CompletionSuccess

TEST_AVS_URL = "https://explorer.test/avs"
TEST_EXPLORER_TOKEN = "explorer-token-123"
TEST_MISTRAL_KEY = "mistral-key-abc"

SAMPLE_AVS = [
    {"address": "0x870679e138bcdf293b7ff14dd44b70fc97e12fc0", "metadataName": "EigenDA", "totalOperators": 210},
    {"address": "0x71a77037870169d47aad6c2c9360861a4c0df2bf", "metadataName": "Lagrange", "totalOperators": 48},
]


@pytest.fixture
def settings():
    return Settings(
        mistral_api_key=TEST_MISTRAL_KEY,
        eigen_explorer_api_key=TEST_EXPLORER_TOKEN,
        avs_url=TEST_AVS_URL,
        model="mistral/mistral-large-latest",
        request_timeout=5.0,
    )


class FakeFetcher:
    """Returns a fixed dataset and counts calls."""

    def __init__(self, dataset=None):
        self.dataset = dataset if dataset is not None else AvsDataset(records=SAMPLE_AVS)
        self.calls = 0

    def fetch(self):
        self.calls += 1
        return self.dataset


class FakeCompleter:
    """Returns a fixed outcome and records every prompt it was given."""

    def __init__(self, outcome=None):
        self.outcome = outcome if outcome is not None else CompletionSuccess(contents=["Hello"])
        self.prompts = []

    def complete(self, prompt):
        self.prompts.append(prompt)
        return self.outcome


@pytest.fixture
def fake_fetcher():
    return FakeFetcher()


@pytest.fixture
def fake_completer():
    return FakeCompleter()


def make_completion_response(*contents):
    """Shape of a litellm ModelResponse, as far as the completer reads it."""
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=c)) for c in contents]
    )
