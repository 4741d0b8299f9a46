from __future__ import annotations

import json
import logging
import time
from typing import Any, Callable, Mapping

import httpx

from .config_types import ClientConfig
from .errors import ProtocolError, TransportError
from .errors_utils import classify_error

log = logging.getLogger(__name__)


def format_elapsed_ms(seconds: float) -> str:
    """Milliseconds rounded to 3 significant digits, without exponent for sane values."""
    return f"{float(f'{seconds * 1000:.3g}'):g}"


class Transport:
    """Owns the httpx client and performs one POST round trip per request.

    Not safe for concurrent use from several threads; use one instance per thread
    or serialize access.
    """

    def __init__(self, cfg: ClientConfig, *, transport: httpx.BaseTransport | None = None):
        self._cfg = cfg
        headers = {"Content-Type": "application/json"}
        if cfg.user_agent:
            headers["User-Agent"] = cfg.user_agent

        self._client = httpx.Client(
            timeout=httpx.Timeout(cfg.timeout_s, connect=cfg.connect_timeout_s),
            headers=headers,
            follow_redirects=True,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def url_for(self, endpoint: str) -> str:
        return f"{self._cfg.base_url}{endpoint}.json"

    def request(self, endpoint: str, params: Mapping[str, Any] | None = None) -> Any:
        payload = dict(params or {})
        payload["key"] = self._cfg.apikey
        body = json.dumps(payload)
        url = self.url_for(endpoint)
        debug = self._cfg.debug

        trace: list[str] = []
        extensions = {"trace": _trace_hook(trace)} if debug else None
        if debug:
            log.debug("Call to %s: %s", url, body)

        start = time.perf_counter()
        try:
            r = self._client.post(url, content=body.encode("utf-8"), extensions=extensions)
        except httpx.RequestError as e:
            if debug:
                _log_trace(trace, e.request if _has_request(e) else None, None)
                log.debug("Failed after %sms: %s", format_elapsed_ms(time.perf_counter() - start), e)
            raise TransportError(f"API call to {endpoint} failed: {e}") from e
        elapsed = time.perf_counter() - start

        text = r.text
        if debug:
            _log_trace(trace, r.request, r)
            log.debug("Completed in %sms", format_elapsed_ms(elapsed))
            log.debug("Got response: %s", text)

        try:
            data = r.json()
        except ValueError:
            data = None
        if data is None:
            raise ProtocolError(
                f"We were unable to decode the JSON response from the Mandrill API: {text}",
                text,
            )

        if r.status_code >= 400:
            raise classify_error(data, status_code=r.status_code)

        return data


def _has_request(exc: httpx.RequestError) -> bool:
    try:
        exc.request
    except RuntimeError:
        return False
    return True


def _trace_hook(lines: list[str]) -> Callable[[str, dict], None]:
    def hook(event_name: str, info: dict) -> None:
        extra = ""
        if event_name.endswith(".failed") and "exception" in info:
            extra = f" {info['exception']!r}"
        lines.append(f"* {event_name}{extra}")

    return hook


def _log_trace(lines: list[str], request: httpx.Request | None, response: httpx.Response | None) -> None:
    out = list(lines)
    if request is not None:
        out.append(f"> {request.method} {request.url}")
        out.extend(f"> {k}: {v}" for k, v in request.headers.items())
    if response is not None:
        out.append(f"< {response.http_version} {response.status_code} {response.reason_phrase}")
        out.extend(f"< {k}: {v}" for k, v in response.headers.items())
    log.debug("\n".join(out))
