"""HTTP server that can upgrade clients to the WebSocket protocol."""

from __future__ import annotations

import abc
import base64
import hashlib
import logging
import weakref
from typing import Any, Optional

from tapenet.headers import HttpHeader
from tapenet.http_message import HttpMessage
from tapenet.http_server import HttpRequestHandler, HttpServer
from tapenet.http_types import HeaderField, Protocol
from tapenet.server import ClientManager, Server
from tapenet.ws_builder import WebsocketMessageBuilder
from tapenet.ws_header import OpCode
from tapenet.ws_message import WebsocketMessage

__all__ = [
    "HANDSHAKE_GUID",
    "WebsocketClientListener",
    "WebsocketClientManager",
    "WebsocketServer",
    "websocket_accept",
    "handshake_response",
]

logger = logging.getLogger(__name__)

HANDSHAKE_GUID = "258EAFA5-E914-47DA-95CA-C5AB0DC85B11"


def websocket_accept(key: str) -> str:
    """Return the Sec-WebSocket-Accept value answering ``key``."""
    digest = hashlib.sha1((key + HANDSHAKE_GUID).encode("utf-8")).digest()
    return base64.b64encode(digest).decode("ascii")


def handshake_response(accept_hash: str) -> HttpMessage:
    """Return the 101 response that completes a WebSocket handshake."""
    header = HttpHeader.response(Protocol.HTTP_1_1, 101)
    header.set_field(HeaderField.UPGRADE, "websocket")
    header.set_field(HeaderField.CONNECTION, "Upgrade")
    header.set_field(HeaderField.SEC_WEBSOCKET_ACCEPT, accept_hash)
    return HttpMessage(header)


class WebsocketClientListener(abc.ABC):
    """Application code that deals with WebSocket clients."""

    @abc.abstractmethod
    def on_ws_client_connected(self, client: Any, request_target: str) -> bool:
        """Return whether to accept a client upgrading on ``request_target``."""

    @abc.abstractmethod
    def on_ws_client_message(self, client: Any, message: WebsocketMessage) -> None:
        """Called with each text or binary message from a client."""

    @abc.abstractmethod
    def on_ws_client_closed(self, client: Any) -> None:
        """Called when a client sends a close frame."""


class WebsocketClientManager(ClientManager):
    """Route the messages of upgraded clients to their WebSocket server."""

    def __init__(self, owner: "WebsocketServer") -> None:
        self._owner = weakref.ref(owner)

    def on_client_connecting(self, client: Any, error: Any) -> bool:
        # Upgraded clients are already connected; this is never expected.
        return False

    def on_client_connected(self, client: Any) -> None:
        """Upgraded clients are already connected; nothing to do."""

    def on_client_read(self, client: Any, message: WebsocketMessage) -> None:
        server = self._owner()
        if server is None:
            return
        opcode = message.header.opcode
        if opcode in (OpCode.TEXT, OpCode.BINARY):
            server.on_ws_message(client, message)
        elif opcode == OpCode.CLOSE:
            server.on_ws_close(client)
        elif opcode == OpCode.PING:
            server.on_ws_ping(client, message)
        elif opcode == OpCode.PONG:
            server.on_ws_pong(client)
        else:
            logger.error("Invalid op code : %d", int(opcode))

    def on_client_closed(self, client: Any) -> None:
        """Nothing to release for a closed client."""


class WebsocketServer(HttpServer):
    """HTTP server that hands upgrade requests over to a WebSocket listener.

    Clients are expected to offer ``send``, ``set_msg_builder`` and ``set_manager``.
    """

    def __init__(
        self,
        request_handler: HttpRequestHandler,
        listener: WebsocketClientListener,
        server: Optional[Server] = None,
    ) -> None:
        super().__init__(request_handler, server)
        self.listener = listener
        self.client_manager = WebsocketClientManager(self)

    def process_request(self, client: Any, message: HttpMessage) -> None:
        if self._upgrade(client, message.header):
            return
        super().process_request(client, message)

    def _upgrade(self, client: Any, header: HttpHeader) -> bool:
        upgrade = header.get_field(HeaderField.UPGRADE)
        if upgrade is None or upgrade.lower() != "websocket":
            return False

        if not self.listener.on_ws_client_connected(client, header.request_target):
            if self.server is not None:
                self.server.remove_client(client)
            return True

        client.set_msg_builder(WebsocketMessageBuilder())
        client.set_manager(self.client_manager)

        key = header.get_field(HeaderField.SEC_WEBSOCKET_KEY)
        if key is None:
            logger.warning("upgrade request without Sec-WebSocket-Key:\n%s", header.to_string())
            return False
        client.send(handshake_response(websocket_accept(key)))
        return True

    def on_ws_message(self, client: Any, message: WebsocketMessage) -> None:
        """Pass a text or binary message to the listener."""
        self.listener.on_ws_client_message(client, message)

    def on_ws_close(self, client: Any) -> None:
        """Tell the listener that the client is closing."""
        self.listener.on_ws_client_closed(client)

    def on_ws_ping(self, client: Any, message: WebsocketMessage) -> None:
        """Answer a ping with a pong carrying the same payload."""
        client.send(WebsocketMessage.pong(message.payload))

    def on_ws_pong(self, client: Any) -> None:
        """Pongs need no answer."""