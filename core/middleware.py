"""Request middleware."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from core.logging import bind_context, clear_context

if TYPE_CHECKING:
    from collections.abc import Callable

    from django.http import HttpRequest, HttpResponse

REQUEST_ID_HEADER = "X-Request-ID"


class RequestContextMiddleware:
    """Bind request id and path into the logging context for each request."""

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        """Store the next handler in the chain."""
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """Handle one request inside a fresh logging context."""
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        clear_context()
        bind_context(request_id=request_id, path=request.path, method=request.method)
        try:
            response = self.get_response(request)
        finally:
            clear_context()
        response[REQUEST_ID_HEADER] = request_id
        return response
