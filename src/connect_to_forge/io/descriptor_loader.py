"""Downloading and parsing Connect descriptors over HTTP(S)."""

import json
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from connect_to_forge.exceptions import DescriptorDownloadError, DescriptorParseError
from connect_to_forge.models.descriptor import ConnectDescriptor

logger = logging.getLogger(__name__)


class HttpDescriptorLoader:
    """
    Fetches atlassian-connect.json from the app's public URL.

    Args:
        timeout: Request timeout in seconds
        client: Optional pre-configured httpx.Client (used by tests)
    """

    def __init__(self, timeout: float = 30.0, client: httpx.Client | None = None):
        self.timeout = timeout
        self._client = client
        self._logger = logger.getChild(self.__class__.__name__)

    def fetch(self, url: str) -> ConnectDescriptor:
        """
        Download and parse the descriptor at the given URL.

        Raises:
            DescriptorDownloadError: On network errors or non-2xx responses
            DescriptorParseError: If the body is not a valid Connect descriptor
        """
        self._logger.info(f"Downloading Connect descriptor from {url}")
        payload = self._parse_json(self._download(url), url)
        return self._to_descriptor(payload, url)

    def _download(self, url: str) -> str:
        client = self._client or httpx.Client(
            timeout=self.timeout, follow_redirects=True
        )
        try:
            response = client.get(url)
            response.raise_for_status()
            return response.text
        except httpx.HTTPStatusError as e:
            raise DescriptorDownloadError(
                f"Error downloading Atlassian Connect descriptor at {url}: {e}",
                url=url,
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise DescriptorDownloadError(
                f"Error downloading Atlassian Connect descriptor at {url}: {e}",
                url=url,
            ) from e
        finally:
            if self._client is None:
                client.close()

    @staticmethod
    def _parse_json(body: str, url: str) -> dict[str, Any]:
        try:
            payload = json.loads(body)
        except json.JSONDecodeError as e:
            raise DescriptorParseError(
                f"Descriptor at {url} is not valid JSON: {e}", url=url
            ) from e

        if not isinstance(payload, dict):
            raise DescriptorParseError(
                f"Descriptor at {url} must be a JSON object, "
                f"got {type(payload).__name__}",
                url=url,
            )
        return payload

    @staticmethod
    def _to_descriptor(payload: dict[str, Any], url: str) -> ConnectDescriptor:
        try:
            return ConnectDescriptor.model_validate(payload)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"]) or None
            raise DescriptorParseError(
                f"Descriptor at {url} is not a valid Connect descriptor: "
                f"{first['msg']}",
                url=url,
                field_name=field,
            ) from e
