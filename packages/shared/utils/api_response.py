"""
Response envelope for the ranked list schema API.
Every response carries: data, machine_readable (JSON-LD or {}), metadata.
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

API_VERSION = "v1"


def request_id_from_request(request: Any) -> str:
    """request_id set by the middleware, or a fresh one."""
    return getattr(request.state, "request_id", None) or str(uuid.uuid4())


def chat_first_response(
    data: Any,
    *,
    machine_readable: Optional[Dict[str, Any]] = None,
    request_id: Optional[str] = None,
    **extra: Any,
) -> Dict[str, Any]:
    """
    Build the standard envelope:
        {
            "data": ...,
            "machine_readable": {"@context": "https://schema.org", "@type": "ItemList", ...} or {},
            "metadata": {"api_version", "timestamp", "request_id"},
            ...extra (e.g. script_tag)
        }
    """
    payload: Dict[str, Any] = {
        "data": data,
        "machine_readable": machine_readable if machine_readable is not None else {},
        "metadata": {
            "api_version": API_VERSION,
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "request_id": request_id or str(uuid.uuid4()),
        },
    }
    payload.update(extra)
    return payload
