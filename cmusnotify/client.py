"""Client for the cmus remote-control UNIX socket."""

import socket
from pathlib import Path
from typing import Optional, Union

from .module_registry import module_registry
from .protocol import DEFAULT_BUFSIZE, TransportError, read_response, request, write_request

log = module_registry.register_module(
    name="client",
    description="Socket connection lifecycle",
    logger_name="client",
    debug_flag="--debug-client",
)


class CmusConnectionError(Exception):
    """cmus could not be reached, usually because it is not running."""

    pass


class CmusClient:
    """One connection to cmus, used for a single request/response exchange."""

    def __init__(self, socket_path: Union[str, Path], bufsize: int = DEFAULT_BUFSIZE):
        """Initialize client for the given socket path without connecting."""
        self._socket_path = str(socket_path)
        self._bufsize = bufsize
        self._sock: Optional[socket.socket] = None

    def __enter__(self) -> "CmusClient":
        self.connect()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.close()
        else:
            # Keep the original error; the socket is closed regardless
            self._close_quietly()

    def connect(self) -> None:
        """
        Connect to the cmus socket.

        Raises:
            CmusConnectionError: If the socket is missing or refuses the connection
        """
        sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        try:
            sock.connect(self._socket_path)
        except OSError as e:
            sock.close()
            raise CmusConnectionError(f"Unable to connect to {self._socket_path}: {e}") from e

        self._sock = sock
        log.debug("Connected to %s", self._socket_path)

    def query_status(self) -> str:
        """Send the status command and return the raw response text."""
        if self._sock is None:
            raise TransportError("Not connected")

        write_request(self._sock, request())
        return read_response(self._sock, self._bufsize)

    def close(self) -> None:
        """
        Shut down both directions of the connection and close it.

        Raises:
            TransportError: If the shutdown fails
        """
        if self._sock is None:
            return

        sock, self._sock = self._sock, None
        try:
            sock.shutdown(socket.SHUT_RDWR)
        except OSError as e:
            raise TransportError(f"Unable to shutdown socket: {e}") from e
        finally:
            sock.close()
        log.debug("Disconnected from %s", self._socket_path)

    def _close_quietly(self) -> None:
        if self._sock is not None:
            self._sock.close()
            self._sock = None
