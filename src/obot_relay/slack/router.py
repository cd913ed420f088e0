"""Slack events webhook router."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from pydantic import ValidationError

from obot_relay.models.slack import SlackEventEnvelope
from obot_relay.slack.handlers import handle_slack_event
from obot_relay.slack.verification import verify_slack_signature
from obot_relay.task.client import TaskForwarder

logger = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["slack"])


def get_forwarder(request: Request) -> TaskForwarder:
    """Return the task forwarder created in the application lifespan."""
    return request.app.state.forwarder


@router.post("/slack/events")
async def slack_events(
    request: Request,
    forwarder: TaskForwarder = Depends(get_forwarder),
) -> Response:
    """Receive Slack webhook events.

    The raw body is logged before parsing. Only POST is routed here; FastAPI
    answers other methods with 405.
    """
    body = await request.body()
    logger.info("Raw event data: %s", body.decode("utf-8", errors="replace"))

    verify_slack_signature(request, body, request.app.state.settings.slack_signing_secret)

    try:
        envelope = SlackEventEnvelope.model_validate_json(body)
    except ValidationError as exc:
        logger.warning("Failed to parse Slack event: %s", exc.errors(include_url=False))
        raise HTTPException(status_code=400, detail="Failed to parse request body") from exc

    return await handle_slack_event(envelope, forwarder)
