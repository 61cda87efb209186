"""HTTP request dispatch on top of a listening server."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Any, Optional

from tapenet.http_message import HttpMessage
from tapenet.http_parser import HttpMessageBuilder
from tapenet.http_types import Method
from tapenet.server import ClientManager, Server

__all__ = ["HttpRequest", "HttpRequestHandler", "HttpServer"]

INTERNAL_ERROR_STATUS = 500


@dataclass
class HttpRequest:
    """One received request and the response chosen for it.

    A handler sets ``response_msg`` to answer, or ``handled`` to say it has
    answered (or will answer) on its own.
    """

    request_msg: HttpMessage
    client: Any = None
    response_msg: Optional[HttpMessage] = None
    handled: bool = False


class HttpRequestHandler(abc.ABC):
    """Application code that answers HTTP requests."""

    @abc.abstractmethod
    def handle(self, request: HttpRequest) -> None:
        """Inspect ``request`` and fill in its response."""


class HttpServer(ClientManager):
    """Give each client an HTTP parser and pass its requests to a handler.

    Clients are expected to offer ``send(message)`` and ``set_msg_builder(builder)``.
    """

    def __init__(self, request_handler: HttpRequestHandler, server: Optional[Server] = None) -> None:
        self.request_handler = request_handler
        self.server = server

    def on_client_connecting(self, client: Any, error: Any) -> bool:
        client.set_msg_builder(HttpMessageBuilder())
        return True

    def on_client_connected(self, client: Any) -> None:
        """Nothing to do until the client sends a request."""

    def on_client_read(self, client: Any, message: HttpMessage) -> None:
        self.process_request(client, message)

    def process_request(self, client: Any, message: HttpMessage) -> None:
        """Let the handler answer a request; send its response unless it handled it."""
        request = HttpRequest(request_msg=message, client=client)
        if message.header.method is not Method.UNKNOWN_TYPE:
            self.request_handler.handle(request)
        if not request.handled:
            self.send_response(request)

    def send_response(self, request: HttpRequest) -> None:
        """Send the request's response, or a 500 response if none was set."""
        client = request.client
        if client is None:
            return
        if request.response_msg is None:
            request.response_msg = HttpMessage.response(INTERNAL_ERROR_STATUS)
        client.send(request.response_msg)