"""HTTP client for TRIAS requests."""

import logging
from typing import TYPE_CHECKING

import aiohttp

from trias_trips.adapters.api_request_logger import log_api_request
from trias_trips.adapters.trias_api.constants import DEFAULT_HEADERS
from trias_trips.domain.errors import TriasHttpError, TriasTransportError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

DEFAULT_TIMEOUT_SECONDS = 10


class TriasHttpClient:
    """Posts TRIAS XML documents to a journey planner endpoint."""

    def __init__(
        self,
        session: "ClientSession",
        endpoint: str,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize with an aiohttp session and the endpoint URL.

        Args:
            session: Shared aiohttp ClientSession.
            endpoint: TRIAS endpoint URL.
            timeout_seconds: Total timeout per request.
        """
        self._session = session
        self._endpoint = endpoint
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    @property
    def endpoint(self) -> str:
        return self._endpoint

    async def post_xml(self, xml_body: str) -> str:
        """POST an XML document and return the response body.

        Args:
            xml_body: TRIAS request document.

        Returns:
            Response body text.

        Raises:
            TriasHttpError: If the endpoint answers with a non-2xx status.
            TriasTransportError: If the request could not be sent or timed out.
        """
        log_api_request("POST", self._endpoint, headers=DEFAULT_HEADERS, payload=xml_body)

        try:
            async with self._session.post(
                self._endpoint,
                data=xml_body.encode("utf-8"),
                headers=DEFAULT_HEADERS,
                timeout=self._timeout,
            ) as response:
                text = await response.text()
                if not 200 <= response.status < 300:
                    logger.warning(
                        f"TRIAS endpoint returned status {response.status}: {text[:200]}"
                    )
                    raise TriasHttpError(response.status, text)
                return text
        except TimeoutError as e:
            raise TriasTransportError(f"Request to {self._endpoint} timed out") from e
        except aiohttp.ClientError as e:
            raise TriasTransportError(f"Request to {self._endpoint} failed: {e}") from e
