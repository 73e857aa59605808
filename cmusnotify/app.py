"""One query/format/notify cycle against cmus."""

from enum import Enum
from pathlib import Path
from typing import Callable, Optional

from .client import CmusClient, CmusConnectionError
from .config import NotifierConfig
from .cover_art import resolve_cover
from .formatter import format_notification
from .metadata import Metadata
from .metadata_parser import parse
from .module_registry import module_registry
from .notifiers import Notifier
from .socket_path import resolve_socket_path

log = module_registry.register_module(
    name="app",
    description="Notify cycle wiring (query, format, deliver)",
    logger_name="app",
    debug_flag="--debug-app",
)

SocketResolver = Callable[[], Optional[Path]]
ClientFactory = Callable[..., CmusClient]


class RunResult(Enum):
    """How a notify cycle ended."""

    NOTIFIED = "notified"
    NOT_RUNNING = "not_running"


def query_metadata(socket_path: Path, config: NotifierConfig, client_factory: ClientFactory = CmusClient) -> Metadata:
    """
    Fetch and parse the current status from cmus.

    Raises:
        CmusConnectionError: If cmus cannot be reached
        ProtocolError: If the exchange fails after connecting
        MetadataParsingError: If the response is malformed
    """
    with client_factory(socket_path, bufsize=config.recv_bufsize) as client:
        response = client.query_status()
    return parse(response)


def run(
    config: NotifierConfig,
    notifier: Notifier,
    socket_resolver: SocketResolver = resolve_socket_path,
    client_factory: ClientFactory = CmusClient,
) -> RunResult:
    """
    Query cmus and show a notification for what it is playing.

    When cmus cannot be reached a "not running" notification is shown instead.
    Protocol and parse errors propagate to the caller without notifying.
    """
    socket_path = Path(config.socket_path) if config.socket_path else socket_resolver()

    if socket_path is None:
        log.info("No cmus socket path could be determined")
        notifier.notify(config.app_name, config.not_running_message, None)
        return RunResult.NOT_RUNNING

    try:
        metadata = query_metadata(socket_path, config, client_factory)
    except CmusConnectionError as e:
        log.info("cmus is not running: %s", e)
        notifier.notify(config.app_name, config.not_running_message, None)
        return RunResult.NOT_RUNNING

    notification = format_notification(metadata, config.app_name)
    cover = resolve_cover(metadata, config.cover_names)

    log.info("Notifying: %s", notification.title)
    if not notifier.notify(notification.title, notification.message, cover):
        log.warning("Notification could not be delivered")

    return RunResult.NOTIFIED
