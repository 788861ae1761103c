# =============================================================================
# core/client.py  —  Request Executor (the only code that touches the network)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Performs exactly ONE outbound GET against the Interzoid API and classifies
#   the response into an Outcome:
#
#     200  + JSON object   →  SuccessOutcome
#     402  + JSON object   →  PaymentRequiredOutcome   (not an error!)
#     200/402 + bad body   →  ErrorOutcome(MALFORMED_RESPONSE)
#     any other status     →  ErrorOutcome(REMOTE_ERROR)
#     network / timeout    →  ErrorOutcome(TRANSPORT_FAILURE)
#
# AUTHENTICATION:
#   A non-empty key travels in the "x-api-key" header, never in the query
#   string, so it cannot leak into URL logs.  With no key the header is left
#   out entirely, which makes the API answer 402 with its x402 payment
#   requirements.
#
# NO caching, NO retries, NO rate limiting: every call hits the network once.
# =============================================================================

import asyncio
import json
import logging
from typing import Any, Mapping, Optional

import httpx

from core.config import HTTP_TIMEOUT_SECONDS
from core.models import (
    ErrorKind,
    ErrorOutcome,
    Outcome,
    PaymentRequiredOutcome,
    SuccessOutcome,
)

API_KEY_HEADER = "x-api-key"

logger = logging.getLogger(__name__)


def _one_line(text: str) -> str:
    return " ".join(text.split())


def _parse_object(body: str) -> dict[str, Any]:
    """Decode a JSON body that must be an object; raise ValueError otherwise."""
    document = json.loads(body)
    if not isinstance(document, dict):
        raise ValueError(f"expected a JSON object, got {type(document).__name__}")
    return document


class RequestExecutor:
    """Thin async HTTP client for the Interzoid API.

    One httpx.AsyncClient is shared by every call so connections are pooled;
    calls themselves share no state and may run concurrently.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = HTTP_TIMEOUT_SECONDS,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def __aenter__(self) -> "RequestExecutor":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def url_for(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    async def execute(self, credential: str, endpoint: str, params: Mapping[str, str]) -> Outcome:
        url = self.url_for(endpoint)
        headers = {API_KEY_HEADER: credential} if credential else {}
        logger.debug(
            "GET %s params=%s auth=%s", url, dict(params), "api-key" if credential else "none"
        )

        # httpx timeouts apply per phase; wait_for caps the whole request.
        try:
            response = await asyncio.wait_for(
                self._client.get(url, params=dict(params), headers=headers), self.timeout
            )
        except asyncio.TimeoutError:
            logger.warning("Request to %s exceeded %ss", url, self.timeout)
            return ErrorOutcome(
                kind=ErrorKind.TRANSPORT_FAILURE,
                message=f"API request failed: no response within {self.timeout:g}s",
            )
        except httpx.HTTPError as exc:
            detail = str(exc) or type(exc).__name__
            logger.warning("Request to %s failed: %s", url, detail)
            return ErrorOutcome(
                kind=ErrorKind.TRANSPORT_FAILURE,
                message=f"API request failed: {_one_line(detail)}",
            )

        return self.classify(response)

    def classify(self, response: httpx.Response) -> Outcome:
        status = response.status_code
        body = response.text
        logger.debug("Response %s from %s (%d bytes)", status, response.request.url.path, len(body))

        if status == httpx.codes.PAYMENT_REQUIRED:
            try:
                requirements = _parse_object(body)
            except ValueError:
                return ErrorOutcome(
                    kind=ErrorKind.MALFORMED_RESPONSE,
                    message=f"402 Payment Required: {_one_line(body)}",
                    status_code=status,
                )
            return PaymentRequiredOutcome(requirements=requirements)

        if status != httpx.codes.OK:
            return ErrorOutcome(
                kind=ErrorKind.REMOTE_ERROR,
                message=f"API returned status {status}: {_one_line(body)}",
                status_code=status,
            )

        try:
            payload = _parse_object(body)
        except ValueError as exc:
            return ErrorOutcome(
                kind=ErrorKind.MALFORMED_RESPONSE,
                message=f"failed to parse JSON response: {_one_line(str(exc))}",
                status_code=status,
            )
        return SuccessOutcome(payload=payload)
