# =============================================================================
# core/avs.py  -  EigenExplorer AVS registry client (the Dataset Fetcher)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Performs the single outbound read the tool needs: GET /avs on the
#   EigenExplorer API, authenticated with a static X-API-Token header.
#
# FAILURE POLICY:
#   The registry is an untrusted remote dependency.  Every way the request
#   can go wrong (HTTP error status, DNS/connection failure, timeout, a body
#   that is not JSON) is logged here and turned into an empty dataset.
#   Callers never see an exception from fetch(); the worst they get is
#   AvsDataset(records=[], error="...").
#
#   There is no retry and no caching.  Each tool call fetches fresh data.
# =============================================================================

import http.client
import json
import logging
import urllib.error
import urllib.request

from core.config import Settings
from core.models import AvsDataset

logger = logging.getLogger(__name__)


class AvsClient:
    """Fetches the AVS list from the EigenExplorer API."""

    def __init__(self, settings: Settings):
        self._url = settings.avs_url
        self._token = settings.eigen_explorer_api_key
        self._timeout = settings.request_timeout

    def fetch(self) -> AvsDataset:
        """Fetch the current AVS dataset.

        Returns:
            The parsed JSON body on a 2xx response, otherwise an empty
            dataset carrying the failure reason.  Never raises.
        """
        req = urllib.request.Request(
            self._url,
            headers={
                # An unset token is sent as an empty header; the registry
                # decides whether that is acceptable.
                "X-API-Token": self._token or "",
                "Accept": "application/json",
            },
            method="GET",
        )

        try:
            with urllib.request.urlopen(req, timeout=self._timeout) as response:
                status = response.status
                if not 200 <= status < 300:
                    return self._degrade(f"AVS API HTTP error! status: {status}")
                body = response.read()
            records = json.loads(body.decode("utf-8"))
        except urllib.error.HTTPError as e:
            return self._degrade(f"AVS API HTTP error! status: {e.code}")
        except (urllib.error.URLError, http.client.HTTPException, OSError, ValueError) as e:
            # URLError: DNS / refused connection.  OSError: timeouts and
            # resets.  ValueError: body is not valid UTF-8 JSON.
            return self._degrade(str(e) or type(e).__name__)

        return AvsDataset(records=records)

    @staticmethod
    def _degrade(reason: str) -> AvsDataset:
        logger.warning("Error fetching AVS endpoint: %s", reason)
        return AvsDataset(records=[], error=reason)
