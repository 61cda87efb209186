"""Listening server: client registry and fan-out of client events to listeners."""

from __future__ import annotations

import threading
import weakref
from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

__all__ = ["ClientManager", "Server"]


class ClientManager:
    """Receiver of client events; the event hooks do nothing by default."""

    def on_server_created(self, server: "Server") -> None:
        """Remember (weakly) the server that lists this manager."""
        self._created_by = weakref.ref(server)

    def on_client_connecting(self, client: Any, error: Any) -> bool:
        """Return whether to accept a connecting client; ``error`` is None on success."""
        return True

    def on_client_connected(self, client: Any) -> None:
        """Called when a client has been accepted."""

    def on_client_read(self, client: Any, message: Any) -> None:
        """Called with each message read from a client."""

    def on_client_closed(self, client: Any) -> None:
        """Called when a client's connection is closed."""

    def on_message_sent(self, client: Any, message: Any, success: bool) -> None:
        """Called when sending a message to a client has finished."""


class Server(ClientManager):
    """Keep the connected clients (by their ``id``) and pass events on to listeners.

    Listeners are held by weak reference: a listener that has been discarded
    is no longer notified.
    """

    def __init__(self, listeners: Iterable[ClientManager] = ()) -> None:
        self._listeners = [weakref.ref(listener) for listener in listeners]
        self._clients: Dict[int, Any] = {}
        self._lock = threading.Lock()
        for listener in self._live_listeners():
            listener.on_server_created(self)

    def _live_listeners(self) -> Iterator[ClientManager]:
        for ref in self._listeners:
            listener = ref()
            if listener is not None:
                yield listener

    def add_client(self, client: Any) -> None:
        """Register ``client``; an existing client with the same id is kept."""
        with self._lock:
            self._clients.setdefault(client.id, client)

    def remove_client(self, client: Union[Any, int]) -> bool:
        """Unregister a client given itself or its id; return whether it was registered."""
        client_id = client if isinstance(client, int) else client.id
        with self._lock:
            return self._clients.pop(client_id, None) is not None

    def get_client(self, client_id: int) -> Optional[Any]:
        """Return the client with ``client_id``, or None."""
        with self._lock:
            return self._clients.get(client_id)

    def clients(self) -> List[Any]:
        """Return the registered clients ordered by id."""
        with self._lock:
            return [self._clients[key] for key in sorted(self._clients)]

    def clear(self) -> None:
        """Unregister every client."""
        with self._lock:
            self._clients.clear()

    def on_client_connecting(self, client: Any, error: Any) -> bool:
        """Accept the client only without error and if every listener accepts it.

        Listeners are asked in order; once one refuses, the rest are not asked.
        """
        if error is not None:
            return False
        return all(listener.on_client_connecting(client, error)
                   for listener in list(self._live_listeners()))

    def on_client_connected(self, client: Any) -> None:
        self.add_client(client)
        for listener in self._live_listeners():
            listener.on_client_connected(client)

    def on_client_read(self, client: Any, message: Any) -> None:
        for listener in self._live_listeners():
            listener.on_client_read(client, message)

    def on_client_closed(self, client: Any) -> None:
        self.remove_client(client)
        for listener in self._live_listeners():
            listener.on_client_closed(client)

    def on_message_sent(self, client: Any, message: Any, success: bool) -> None:
        for listener in self._live_listeners():
            listener.on_message_sent(client, message, success)