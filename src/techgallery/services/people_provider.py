"""HTTP client for the people provider used to sync directory users."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from techgallery.exceptions import PeopleProviderError

logger = logging.getLogger(__name__)


class PeopleProviderClient:
    """
    Fetch person profiles from the company people API.

    Profiles are JSON objects with ``login``, ``email``, ``name`` and
    ``google_id`` keys, served at ``GET {base_url}/people/{login}``.
    """

    def __init__(
        self,
        base_url: str,
        timeout_seconds: int = 10,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: Root URL of the people API
            timeout_seconds: Request timeout
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.transport = transport

    def get_person(self, login: str) -> dict[str, Any] | None:
        """
        Fetch a person profile by login.

        Args:
            login: Local part of the person's e-mail address

        Returns:
            Profile dictionary, or None if the provider does not know the login

        Raises:
            PeopleProviderError: If the request fails or the response is not JSON
        """
        url = f"{self.base_url}/people/{login}"
        try:
            with httpx.Client(timeout=self.timeout_seconds, transport=self.transport) as client:
                response = client.get(url)
                if response.status_code == 404:
                    return None
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            raise PeopleProviderError(
                f"People provider returned {e.response.status_code} for '{login}'"
            ) from e
        except (httpx.RequestError, ValueError) as e:
            logger.warning("People provider request for %s failed: %s", login, e)
            raise PeopleProviderError(f"People provider request failed: {e}") from e
