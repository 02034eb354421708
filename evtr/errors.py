"""Error types raised across the application."""

from __future__ import annotations

from enum import Enum


class ErrorArea(Enum):
    """Part of the application an error came from."""

    APP = "app"
    CONFIG = "config"
    SELECTOR = "selector"
    MONITOR = "monitor"

    def __str__(self) -> str:
        return self.value

    def io(self, context: str, source: BaseException) -> "ExternalError":
        """Wrap an I/O failure that happened in this area."""
        return ExternalError(self, ExternalSourceKind.IO, context, source)

    def evdev(self, context: str, source: BaseException) -> "ExternalError":
        """Wrap an input-device failure that happened in this area."""
        return ExternalError(self, ExternalSourceKind.EVDEV, context, source)

    def stream_ended(self, context: str) -> "StreamEndedError":
        """Report that an event stream in this area ran dry."""
        return StreamEndedError(self, context)


class ExternalSourceKind(Enum):
    """Kind of external failure wrapped by an ExternalError."""

    IO = "i/o"
    EVDEV = "evdev"

    def __str__(self) -> str:
        return self.value


class EvtrError(Exception):
    """Base class of every error the application raises."""


class ExternalError(EvtrError):
    """A failure reported by the operating system or an input device."""

    def __init__(
        self,
        area: ErrorArea,
        source_kind: ExternalSourceKind,
        context: str,
        source: BaseException,
    ) -> None:
        super().__init__(f"{area} {source_kind}: {context}: {source}")
        self.area = area
        self.source_kind = source_kind
        self.context = context
        self.source = source
        self.__cause__ = source


class ConfigError(EvtrError):
    """Invalid or unusable configuration."""

    def __init__(self, context: str) -> None:
        super().__init__(f"config: {context}")
        self.context = context


class NoDevicesFoundError(EvtrError):
    """No input devices could be found."""

    def __init__(self) -> None:
        super().__init__("no input devices found")


class StreamEndedError(EvtrError):
    """An event stream ended unexpectedly."""

    def __init__(self, area: ErrorArea, context: str) -> None:
        super().__init__(f"{area} stream ended: {context}")
        self.area = area
        self.context = context