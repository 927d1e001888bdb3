"""
Telemetry — event names and the default reporter.

Nothing here transmits anything. ``LoggingTelemetryReporter`` writes
each event to the log and keeps a bounded tail of recent events so a
host (or a test) can inspect what was reported.
"""

from __future__ import annotations

import logging
from collections import deque
from enum import StrEnum
from typing import Any

from modinstall.core.services import TelemetryReporter

logger = logging.getLogger(__name__)


class EventName(StrEnum):
    PYTHON_INSTALL_PACKAGE = "PYTHON_INSTALL_PACKAGE"


class LoggingTelemetryReporter(TelemetryReporter):
    """Log events and remember the last ``maxlen`` of them."""

    def __init__(self, maxlen: int = 100):
        self._events: deque[tuple[str, dict[str, Any]]] = deque(maxlen=maxlen)

    @property
    def events(self) -> list[tuple[str, dict[str, Any]]]:
        return list(self._events)

    def send_event(self, event_name: str, properties: dict[str, Any]) -> None:
        self._events.append((event_name, dict(properties)))
        logger.info("telemetry %s %s", event_name, properties)

    def clear(self) -> None:
        self._events.clear()
