"""HTTP client for the Fiberplane Studio collector API.

Two read-only endpoints:

    GET {base_url}/v1/traces                   -> list of traces
    GET {base_url}/v1/traces/{trace_id}/spans  -> list of spans

Each call opens its own httpx.Client, makes exactly one request
without following redirects, and either returns validated models or
raises FetchError / DecodeError. There are no retries.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import TypeAdapter, ValidationError

from fpx_trace.errors import DecodeError, FetchError, InvalidArgumentError
from fpx_trace.models.config import DEFAULT_BASE_URL, TraceConfig
from fpx_trace.models.trace import Span, Trace, is_valid_trace_id

logger = logging.getLogger(__name__)

_TRACE_LIST = TypeAdapter(list[Trace])
_SPAN_LIST = TypeAdapter(list[Span])

REQUEST_HEADERS: dict[str, str] = {"Content-Type": "application/json"}


def _describe_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "<root>"
    count = exc.error_count()
    suffix = f" (and {count - 1} more)" if count > 1 else ""
    return f"{location}: {first['msg']}{suffix}"


class TraceClient:
    """Fetch traces and spans from a local collector.

    Args:
        base_url: Collector root URL, without a trailing /v1.
        timeout: Per-request timeout in seconds.
        transport: Optional httpx transport, used by tests to serve
            canned responses.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_config(
        cls,
        config: TraceConfig,
        transport: httpx.BaseTransport | None = None,
    ) -> "TraceClient":
        return cls(
            base_url=config.base_url,
            timeout=config.timeout_seconds,
            transport=transport,
        )

    def list_traces(self) -> list[Trace]:
        """Fetch every trace the collector currently holds.

        Returns:
            Traces in the order the collector returned them. An empty
            list is a valid answer, not an error.

        Raises:
            FetchError: Connection failure, timeout, or non-2xx status.
            DecodeError: Body is not a JSON array of traces.
        """
        return self._get_json("/v1/traces", _TRACE_LIST)

    def list_spans(self, trace_id: str) -> list[Span]:
        """Fetch the spans recorded for a single trace.

        Raises:
            InvalidArgumentError: trace_id is not a hex identifier. No
                request is made in that case.
            FetchError: Connection failure, timeout, or non-2xx status.
            DecodeError: Body is not a JSON array of spans.
        """
        if not is_valid_trace_id(trace_id):
            raise InvalidArgumentError(f"invalid trace id: {trace_id!r}")
        return self._get_json(f"/v1/traces/{trace_id}/spans", _SPAN_LIST)

    def _get_json(self, path: str, adapter: TypeAdapter):
        url = f"{self.base_url}{path}"
        logger.debug("GET %s", url)

        try:
            with httpx.Client(
                timeout=self.timeout,
                follow_redirects=False,
                transport=self._transport,
            ) as client:
                response = client.get(url, headers=REQUEST_HEADERS)
        except httpx.HTTPError as exc:
            logger.debug("GET %s failed: %s", url, type(exc).__name__)
            raise FetchError(url, str(exc) or type(exc).__name__) from exc

        logger.debug("GET %s -> %d (%d bytes)", url, response.status_code, len(response.content))
        if not response.is_success:
            raise FetchError(
                url,
                f"HTTP {response.status_code} {response.reason_phrase}".rstrip(),
                status_code=response.status_code,
            )

        try:
            return adapter.validate_json(response.content)
        except ValidationError as exc:
            raise DecodeError(url, _describe_validation_error(exc)) from exc
