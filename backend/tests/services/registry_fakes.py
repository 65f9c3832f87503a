"""Test doubles shared by the service and route tests."""

from datetime import datetime, timezone

OPERATOR_KEY = "test-operator-key"
FIXED_NOW = datetime(2026, 4, 1, 9, 0, tzinfo=timezone.utc)


class RecordingSink:
    """NotificationSink that keeps every published event."""

    def __init__(self):
        self.events: list[dict] = []

    def publish(self, event: dict) -> None:
        self.events.append(event)
