from __future__ import annotations

from typing import Any, Mapping

import httpx

from . import __version__
from .config_types import DEFAULT_BASE_URL, ClientConfig, normalize_base_url
from .credentials import resolve_apikey
from .logging_ import setup_logging
from .resources import (
    Exports,
    Inbound,
    Ips,
    Messages,
    Metadata,
    Rejects,
    Senders,
    Subaccounts,
    Tags,
    Templates,
    Urls,
    Users,
    Webhooks,
    Whitelists,
)
from .transport import Transport


class Mandrill:
    """Mandrill API client.

    The API key comes from ``apikey``, else ``MANDRILL_APIKEY``, else
    ``~/.mandrill.key`` or ``/etc/mandrill.key``. The underlying HTTP client is
    released by :meth:`close` or by leaving a ``with`` block.
    """

    def __init__(
            self,
            apikey: str | None = None,
            *,
            base_url: str = DEFAULT_BASE_URL,
            debug: bool = False,
            transport: httpx.BaseTransport | None = None,
    ):
        self._cfg = ClientConfig(
            apikey=resolve_apikey(apikey),
            base_url=normalize_base_url(base_url),
            debug=bool(debug),
            user_agent=f"mandrill-client/{__version__}",
        )
        if self._cfg.debug:
            setup_logging(True)
        self._t = Transport(self._cfg, transport=transport)

        self.users = Users(self)
        self.messages = Messages(self)
        self.templates = Templates(self)
        self.tags = Tags(self)
        self.rejects = Rejects(self)
        self.whitelists = Whitelists(self)
        self.senders = Senders(self)
        self.urls = Urls(self)
        self.webhooks = Webhooks(self)
        self.subaccounts = Subaccounts(self)
        self.inbound = Inbound(self)
        self.exports = Exports(self)
        self.ips = Ips(self)
        self.metadata = Metadata(self)

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    @property
    def apikey(self) -> str:
        return self._cfg.apikey

    @property
    def base_url(self) -> str:
        return self._cfg.base_url

    @property
    def debug(self) -> bool:
        return self._cfg.debug

    def call(self, endpoint: str, params: Mapping[str, Any] | None = None) -> Any:
        """POST ``params`` to ``<base_url><endpoint>.json`` and return the decoded body."""
        return self._t.request(endpoint, params)

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> Mandrill:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
