"""Slack event dispatch: verification echo, message filtering, task forwarding."""

import logging

from fastapi import HTTPException, Response
from fastapi.responses import JSONResponse

from obot_relay.models.slack import (
    EVENT_CALLBACK,
    URL_VERIFICATION,
    SlackEventEnvelope,
    SlackMessageEvent,
)
from obot_relay.models.task import TaskRequest
from obot_relay.task.client import TaskForwarder, TaskForwardError

logger = logging.getLogger(__name__)


async def handle_slack_event(envelope: SlackEventEnvelope, forwarder: TaskForwarder) -> Response:
    """Dispatch a Slack envelope based on its type.

    - url_verification: return the challenge token
    - event_callback with a qualifying event: forward it to the task API
    - anything else: acknowledge with an empty 200
    """
    if envelope.type == URL_VERIFICATION:
        return JSONResponse({"challenge": envelope.challenge})

    if envelope.type == EVENT_CALLBACK and is_qualifying_event(envelope.event):
        task = build_task_request(envelope.event)
        logger.info(
            "Forwarding %s from user %s in channel %s",
            envelope.event.type,
            envelope.event.user,
            envelope.event.channel,
        )
        try:
            await forwarder.forward(task)
        except TaskForwardError as exc:
            logger.error("Task API call failed: %s", exc, exc_info=True)
            raise HTTPException(status_code=500, detail=exc.detail) from exc

    return Response(status_code=200)


def is_qualifying_event(event: SlackMessageEvent) -> bool:
    """Return True for app mentions and for human direct messages.

    Direct messages carrying a bot_id are skipped so the relay never answers
    its own (or another bot's) replies.
    """
    if event.type == "app_mention":
        return True
    return event.channel_type == "im" and event.type == "message" and not event.bot_id


def build_task_request(event: SlackMessageEvent) -> TaskRequest:
    """Map a qualifying Slack event onto the task API request body.

    THREAD_ID is the thread root ts, falling back to the message's own ts for
    top-level messages. Direct messages never carry a thread id.
    """
    thread_id = event.thread_ts or event.ts
    if event.channel_type == "im":
        thread_id = ""

    return TaskRequest(
        thread_id=thread_id,
        channel_id=event.channel,
        user_id=event.user,
        query=event.text,
    )
