"""Outbound calls to the Obot task API."""

from obot_relay.task.client import (
    TaskForwardError,
    TaskForwarder,
    TaskRequestBuildError,
    TaskResponseReadError,
)

__all__ = [
    "TaskForwardError",
    "TaskForwarder",
    "TaskRequestBuildError",
    "TaskResponseReadError",
]
