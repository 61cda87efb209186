"""HTTP, WebSocket and simple message framing with server event dispatch."""

__version__ = "0.1.0"