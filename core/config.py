# =============================================================================
# core/config.py  -  Process-wide settings
# =============================================================================
#
# Settings are read from the environment ONCE, in the process entry point
# (tools/mcp_server.py), after load_dotenv() has populated os.environ from
# the project's .env file.  The resulting frozen Settings object is handed
# to AvsClient and MistralCompleter; nothing below the entry point reads
# os.environ.
#
# Missing API keys are not an error here.  An empty EigenExplorer token is
# sent as-is, and an empty Mistral key makes the completion call fail,
# which shows up as an error text in the tool response.
# =============================================================================

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_AVS_URL = "https://api.eigenexplorer.com/avs"
DEFAULT_MODEL = "mistral/mistral-large-latest"
DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class Settings:
    """Read-only configuration shared by every tool invocation."""

    mistral_api_key: str = ""
    eigen_explorer_api_key: str = ""
    avs_url: str = DEFAULT_AVS_URL
    model: str = DEFAULT_MODEL              # LiteLLM "provider/model" string
    request_timeout: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build Settings from environment variables.

        Raises:
            ValueError: if AVS_REQUEST_TIMEOUT is set but is not a number.
        """
        env = os.environ if environ is None else environ

        timeout_raw = env.get("AVS_REQUEST_TIMEOUT", "")
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT_SECONDS
        except ValueError:
            raise ValueError(
                f"AVS_REQUEST_TIMEOUT must be a number of seconds, got {timeout_raw!r}"
            ) from None

        return cls(
            mistral_api_key=env.get("MISTRAL_API_KEY", ""),
            eigen_explorer_api_key=env.get("EIGEN_EXPLORER_API_KEY", ""),
            avs_url=env.get("EIGEN_EXPLORER_AVS_URL") or DEFAULT_AVS_URL,
            model=env.get("AVS_ASSISTANT_MODEL") or DEFAULT_MODEL,
            request_timeout=timeout,
        )
