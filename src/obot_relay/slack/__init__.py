"""Slack ingress: webhook routing, signature verification, and event dispatch."""

from obot_relay.slack.handlers import build_task_request, handle_slack_event, is_qualifying_event
from obot_relay.slack.router import router

__all__ = [
    "build_task_request",
    "handle_slack_event",
    "is_qualifying_event",
    "router",
]
