from __future__ import annotations

import os
from typing import Iterable, Mapping

from .errors import ConfigurationError

ENV_APIKEY = "MANDRILL_APIKEY"
KEY_FILE_PATHS = ("~/.mandrill.key", "/etc/mandrill.key")


def _clean(value: str | None) -> str | None:
    text = (value or "").strip()
    return text or None


def apikey_from_env(environ: Mapping[str, str] | None = None) -> str | None:
    env = os.environ if environ is None else environ
    return _clean(env.get(ENV_APIKEY))


def apikey_from_files(paths: Iterable[str] = KEY_FILE_PATHS) -> str | None:
    for path in paths:
        full = os.path.expanduser(path)
        if not os.path.isfile(full):
            continue
        try:
            with open(full, encoding="utf-8") as fh:
                key = _clean(fh.read())
        except (OSError, UnicodeDecodeError):
            continue
        if key:
            return key
    return None


def resolve_apikey(
        apikey: str | None = None,
        *,
        environ: Mapping[str, str] | None = None,
        paths: Iterable[str] = KEY_FILE_PATHS,
) -> str:
    """Return the first non-empty key from the argument, the environment, then the key files."""
    key = _clean(apikey) or apikey_from_env(environ) or apikey_from_files(paths)
    if not key:
        raise ConfigurationError("You must provide a Mandrill API key")
    return key
