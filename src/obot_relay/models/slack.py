"""Slack Events API envelope and message event models."""

from pydantic import BaseModel, Field, field_validator, model_validator

URL_VERIFICATION = "url_verification"
EVENT_CALLBACK = "event_callback"


class SlackMessageEvent(BaseModel):
    """A Slack ``message`` or ``app_mention`` event (only the fields the relay reads)."""

    type: str = ""
    text: str = ""
    channel: str = ""
    thread_ts: str | None = None  # Root message ts; None for top-level messages
    ts: str = ""  # Slack message ts, e.g., "1234567890.123456"
    user: str = ""
    channel_type: str = ""  # "im" for direct messages
    bot_id: str = ""

    @field_validator(
        "type", "text", "channel", "ts", "user", "channel_type", "bot_id", mode="before"
    )
    @classmethod
    def _null_to_empty(cls, value: object) -> object:
        """Slack sends explicit nulls for some fields; treat them as absent."""
        return "" if value is None else value


class SlackEventEnvelope(BaseModel):
    """Top-level JSON object Slack posts to the events endpoint."""

    type: str = ""
    challenge: str = ""
    event: SlackMessageEvent = Field(default_factory=SlackMessageEvent)

    @model_validator(mode="before")
    @classmethod
    def _null_body(cls, data: object) -> object:
        """A literal JSON null body decodes to an empty envelope."""
        return {} if data is None else data

    @field_validator("type", "challenge", mode="before")
    @classmethod
    def _null_to_empty(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("event", mode="before")
    @classmethod
    def _null_event(cls, value: object) -> object:
        return {} if value is None else value
