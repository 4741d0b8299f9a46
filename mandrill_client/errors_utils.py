from __future__ import annotations

import json
from typing import Any, Mapping

from .errors import ERROR_MAP, MandrillClientError, ServiceError, UnexpectedResponseError


def classify_error(body: Any, status_code: int | None = None) -> MandrillClientError:
    """Build the exception for an error response body.

    The result is returned, not raised. Bodies that do not carry
    ``status == "error"`` and a ``name`` become UnexpectedResponseError;
    names missing from ERROR_MAP fall back to the generic ServiceError.
    """
    if not isinstance(body, Mapping) or body.get("status") != "error" or not body.get("name"):
        return UnexpectedResponseError(f"We received an unexpected error: {_dump(body)}", body)

    name = str(body["name"])
    cls = ERROR_MAP.get(name, ServiceError)
    return cls(body.get("message"), body.get("code"), status_code=status_code, error_name=name)


def _dump(body: Any) -> str:
    try:
        return json.dumps(body, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(body)
