"""
Framing for the cmus remote-control socket.

A request is a single newline-terminated command. A response is a run of
newline-terminated records closed by an empty line, so the byte stream for a
complete response always ends with ``b"\\n\\n"``.
"""

from typing import Optional, Protocol

from .module_registry import module_registry

STATUS_COMMAND = "status"
RESPONSE_TERMINATOR = b"\n\n"
DEFAULT_BUFSIZE = 2048


class ProtocolError(Exception):
    """Base error for request/response exchange problems."""

    pass


class TransportError(ProtocolError):
    """Error raised when the socket fails after the connection was made."""

    pass


class ShortWriteError(TransportError):
    """The transport accepted fewer bytes than the request holds."""

    def __init__(self, sent: int, expected: int):
        super().__init__(f"Short write to socket: sent {sent} of {expected} bytes")
        self.sent = sent
        self.expected = expected


class ConnectionClosedError(TransportError):
    """The peer closed the stream before the response terminator arrived."""

    pass


class ResponseDecodeError(ProtocolError):
    """The response bytes are not valid UTF-8."""

    pass


class Transport(Protocol):
    """The subset of the socket API the codec needs."""

    def send(self, data: bytes) -> int: ...

    def recv(self, bufsize: int) -> bytes: ...


log = module_registry.register_module(
    name="protocol",
    description="Socket request/response framing",
    logger_name="protocol",
    debug_flag="--debug-protocol",
)


def request(command: str = STATUS_COMMAND) -> bytes:
    """Build the wire payload for a command."""
    return f"{command}\n".encode("utf-8")


def write_request(transport: Transport, payload: Optional[bytes] = None) -> None:
    """
    Send a request payload in a single write.

    Args:
        transport: Connected stream socket or compatible object
        payload: Bytes to send, defaults to the status request

    Raises:
        ShortWriteError: If the transport did not accept the whole payload
        TransportError: If the transport raised an OS error
    """
    if payload is None:
        payload = request()

    try:
        sent = transport.send(payload)
    except OSError as e:
        raise TransportError(f"Error writing to socket: {e}") from e

    if sent != len(payload):
        raise ShortWriteError(sent, len(payload))

    log.debug("Sent request: %r", payload)


def read_response(transport: Transport, bufsize: int = DEFAULT_BUFSIZE) -> str:
    """
    Read one framed response from the transport.

    Chunks are accumulated until the buffer ends with a blank line; the
    returned text keeps the terminator.

    Raises:
        ConnectionClosedError: If the stream ends before the terminator
        TransportError: If the transport raised an OS error
        ResponseDecodeError: If the response is not valid UTF-8
    """
    buffer = bytearray()
    chunks = 0

    while not buffer.endswith(RESPONSE_TERMINATOR):
        try:
            chunk = transport.recv(bufsize)
        except OSError as e:
            raise TransportError(f"Error reading from socket: {e}") from e

        if not chunk:
            raise ConnectionClosedError(f"Connection closed after {len(buffer)} bytes without response terminator")

        buffer.extend(chunk)
        chunks += 1

    log.debug("Received %d bytes in %d chunk(s)", len(buffer), chunks)

    try:
        return buffer.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ResponseDecodeError(f"Response is not valid UTF-8: {e}") from e
