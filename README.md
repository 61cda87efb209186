# tapenet

tapenet provides the building blocks for small HTTP and WebSocket servers. The
package has no dependencies outside the standard library. It contains:

- HTTP protocol versions, methods, header fields and status reason phrases
  (`tapenet.http_types`);
- parsing and serialisation of HTTP/1.x headers (`tapenet.headers.HttpHeader`).
  Known header fields are stored by `HeaderField` and written out in their
  canonical spelling. Any other field is kept under the name it was given;
- HTTP messages made of a header and a body, including file responses that get
  their content type from `tapenet.mime.find_mime_type` (`tapenet.http_message`);
- an incremental HTTP message builder. It handles `Content-Length` bodies and
  `Transfer-Encoding: chunked` bodies. Trailer fields after the last chunk are
  skipped. It raises `HttpParseError` on malformed input (`tapenet.http_parser`);
- WebSocket frame headers, messages and fragment assembly (`tapenet.ws_header`,
  `tapenet.ws_message`);
- an incremental WebSocket frame builder (`tapenet.ws_builder`). It unmasks
  payloads, joins fragmented messages and passes through control frames that
  arrive between fragments;
- a simple binary message format (`tapenet.simple_message`). Each message is
  one type byte, then a 64-bit little-endian content size, then the content;
- event dispatch (`tapenet.server`, `tapenet.http_server`,
  `tapenet.websocket_server`):
  - a `Server` that keeps a registry of clients and passes client events on to
    its listeners;
  - an `HttpServer` that hands requests to an `HttpRequestHandler`;
  - a `WebsocketServer` that upgrades clients, answers pings and reports
    messages and closes to a `WebsocketClientListener`.

## What it does not do

tapenet opens no sockets and runs no event loop. It has no TLS and no HTTP or
WebSocket client. Your own code accepts connections, feeds the received bytes to
a builder and writes out the bytes that messages produce. The server classes
expect each client object to have:

- an `id`;
- `send(message)`;
- `set_msg_builder(builder)`;
- `set_manager(manager)`, needed for WebSocket upgrades.

## Installing

```
pip install .
```

## Parsing HTTP incrementally

```python
from tapenet.http_parser import HttpMessageBuilder

builder = HttpMessageBuilder()
messages = builder.feed(b"GET /index.html HTTP/1.1\r\nHost: example.com\r\n\r\n")
request = messages[0]
print(request.header.request_target)   # /index.html
```

You can feed data in pieces of any size. `feed` returns the messages that the
new bytes complete. `builder.state` reports how far the builder has got.

## Building responses

```python
from tapenet.http_message import HttpMessage

response = HttpMessage.response(200, "hello")
wire = response.to_bytes()
part = response.data_subset(16, 0)   # first 16 bytes of the wire form
```

`HttpMessage.response` always sets `Content-Length`. `HttpMessage.request` sets
it only when the body is not empty. `HttpMessage.from_file(path)` reads a file
into a 200 response and raises `OSError` if the file cannot be read.

The protocol `HTTP_1_0` is written out as `HTTP/2` by
`protocol_to_string` and by header serialisation.

## Dispatching requests

```python
from tapenet.http_message import HttpMessage
from tapenet.http_server import HttpRequestHandler, HttpServer
from tapenet.server import Server


class Hello(HttpRequestHandler):
    def handle(self, request):
        request.response_msg = HttpMessage.response(200, "hello")


class Client:
    id = 1

    def set_msg_builder(self, builder):
        self.builder = builder

    def send(self, message):
        print(message.to_bytes())


http = HttpServer(Hello())
server = Server([http])   # listeners are held weakly; keep `http` referenced
http.server = server

client = Client()
if server.on_client_connecting(client, None):
    server.on_client_connected(client)
    for message in client.builder.feed(b"GET / HTTP/1.1\r\n\r\n"):
        server.on_client_read(client, message)
```

A handler can leave `response_msg` unset. In that case the server sends a 500
response. If the handler sets `handled = True`, nothing is sent.

## WebSocket

```python
from tapenet.ws_builder import WebsocketMessageBuilder
from tapenet.ws_message import WebsocketMessage

frame = WebsocketMessage.text("hi").to_bytes()
received = WebsocketMessageBuilder().feed(frame)
print(received[0].payload)   # b'hi'
```

`WebsocketServer(handler, listener, server)` behaves like `HttpServer`, but it
handles requests carrying `Upgrade: websocket` itself:

1. It asks the listener's `on_ws_client_connected` whether to accept the client.
2. It gives the client a `WebsocketMessageBuilder` and its own client manager.
3. It replies with the 101 handshake response.

`websocket_accept(key)` computes the `Sec-WebSocket-Accept` value.
`handshake_response(accept_hash)` builds the 101 response.

## Simple messages

```python
from tapenet.simple_message import SimpleMessage, SimpleMessageBuilder

wire = SimpleMessage(1, b"ping").to_bytes()
messages = SimpleMessageBuilder().feed(wire)
```

## Running the tests

```
pip install .[test]
pytest
```