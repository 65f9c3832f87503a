"""Notification Sinks - shell implementations of the core NotificationSink protocol.

Invariants:
    - publish() receives the event dict produced by core.record_snapshot.to_event
    - LoggingNotificationSink never mutates the event

Design Decisions:
    - Default sink is a structured log line: downstream indexing tails the JSON logs
    - Dedicated logger name so operators can route registry events separately
"""

import logging

event_logger = logging.getLogger("registry.events")


class LoggingNotificationSink:
    """Emits each registry event as one INFO log record."""

    def __init__(self, logger: logging.Logger = event_logger):
        self._logger = logger

    def publish(self, event: dict) -> None:
        self._logger.info(
            f"{event['entity_kind']} created",
            extra={"entity_kind": event["entity_kind"], "event": event},
        )
