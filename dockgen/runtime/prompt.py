"""Port acquisition for the generated image.

The prompt never raises: a failure comes back as a PortResult carrying the
error text, and the plugin decides whether to fall back or abort.
"""

import logging
from typing import Optional, Protocol, runtime_checkable

import click

from dockgen.runtime.types import PortResult

logger = logging.getLogger(__name__)


@runtime_checkable
class PortPrompt(Protocol):
    """Anything that can be called to obtain a port number."""

    def __call__(self) -> PortResult:
        ...


def validate_port(value: str) -> str:
    """click value_proc: accept 1-65535, reject everything else."""
    value = (value or "").strip()
    if not value:
        raise click.BadParameter("port must not be empty")
    if not value.isdigit() or not 0 < int(value) < 65536:
        raise click.BadParameter(f"{value!r} is not a valid port number")
    return value


class ClickPortPrompt:
    """Ask for the port on the terminal. Blocks until answered."""

    def __init__(self, label: str = "Enter Port", default: Optional[str] = None):
        self.label = label
        self.default = default

    def __call__(self) -> PortResult:
        try:
            value = click.prompt(
                self.label,
                default=self.default,
                value_proc=validate_port,
                show_default=self.default is not None,
            )
        except (click.Abort, EOFError, KeyboardInterrupt) as exc:
            message = str(exc) or "port prompt aborted"
            logger.debug("Port prompt failed: %s", message)
            return PortResult.failure(message)
        return PortResult.success(value)


class StaticPortPrompt:
    """Non-interactive prompt returning a fixed port."""

    def __init__(self, port: str):
        self.port = str(port)

    def __call__(self) -> PortResult:
        try:
            return PortResult.success(validate_port(self.port))
        except click.BadParameter as exc:
            return PortResult.failure(exc.format_message())
