from __future__ import annotations
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://mandrillapp.com/api/1.0/"


def normalize_base_url(raw: str | None) -> str:
    value = (raw or "").strip() or DEFAULT_BASE_URL
    return value.rstrip("/") + "/"


@dataclass(frozen=True)
class ClientConfig:
    apikey: str
    base_url: str = DEFAULT_BASE_URL
    debug: bool = False
    connect_timeout_s: float = 30.0
    timeout_s: float = 600.0
    user_agent: str | None = None
