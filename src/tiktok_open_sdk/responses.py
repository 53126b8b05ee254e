"""Response normalization.

Every API call returns a ResponseEnvelope built from the transport
response: ``success`` mirrors the transport's 2xx classification,
``code`` is the numeric status and ``response`` is the decoded JSON
body, or ``{"raw": body}`` when the body is not JSON.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from .http_client import HttpResponse


@dataclass(frozen=True)
class ResponseEnvelope:
    """Normalized result of an Open API call.

    Attributes:
        success: Whether the transport classified the status as 2xx
        code: HTTP status code
        response: Parsed JSON body, or {"raw": text} if parsing failed
    """

    success: bool
    code: int
    response: Any

    def to_dict(self) -> dict[str, Any]:
        return {"success": self.success, "code": self.code, "response": self.response}


def parse_json(text: str) -> Any:
    """Decode a JSON document, falling back to {"raw": text}."""
    try:
        return json.loads(text)
    except ValueError:
        return {"raw": text}


def render_response(response: HttpResponse) -> ResponseEnvelope:
    return ResponseEnvelope(
        success=response.is_success,
        code=int(response.status_code),
        response=parse_json(response.text),
    )


__all__ = ["ResponseEnvelope", "parse_json", "render_response"]
