"""Data models for inbound Slack events and outbound task requests."""

from obot_relay.models.slack import SlackEventEnvelope, SlackMessageEvent
from obot_relay.models.task import TaskRequest

__all__ = [
    "SlackEventEnvelope",
    "SlackMessageEvent",
    "TaskRequest",
]
