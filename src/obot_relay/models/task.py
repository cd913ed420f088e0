"""Request body sent to the Obot task API."""

from pydantic import BaseModel, ConfigDict, Field


class TaskRequest(BaseModel):
    """Flat remapping of a Slack message event.

    Serialized with ``by_alias=True`` to produce the upper-case keys the
    task API expects.
    """

    model_config = ConfigDict(populate_by_name=True)

    thread_id: str = Field(alias="THREAD_ID")
    channel_id: str = Field(alias="CHANNEL_ID")
    user_id: str = Field(alias="USER_ID")
    query: str = Field(alias="QUERY")

    def to_payload(self) -> dict[str, str]:
        """Return the JSON-ready body with upper-case keys."""
        return self.model_dump(by_alias=True)
