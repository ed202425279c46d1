"""API response helpers."""

from .api_response import chat_first_response, request_id_from_request

__all__ = ["chat_first_response", "request_id_from_request"]
