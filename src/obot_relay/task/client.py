"""Cookie-authenticated POST to the Obot task API.

The forwarder carries the access token and target URL explicitly and wraps a
shared ``httpx.AsyncClient`` created in the application lifespan. Failures
are reported per stage (build, send, read) so the caller can say which one
went wrong.
"""

import logging

import httpx

from obot_relay.config import Settings
from obot_relay.models.task import TaskRequest

logger = logging.getLogger(__name__)

ACCESS_TOKEN_COOKIE = "obot_access_token"


class TaskForwardError(Exception):
    """Building, sending, or reading the task API request failed."""

    detail = "Failed to send request to API"


class TaskRequestBuildError(TaskForwardError):
    """The outbound request could not be constructed (missing or malformed URL)."""

    detail = "Failed to create API request"


class TaskResponseReadError(TaskForwardError):
    """The task API answered but its body could not be read."""

    detail = "Failed to read response body"


class TaskForwarder:
    """Send task requests to a single configured task API endpoint."""

    def __init__(self, client: httpx.AsyncClient, url: str, access_token: str) -> None:
        self._client = client
        self.url = url
        self._access_token = access_token

    @classmethod
    def from_settings(cls, settings: Settings) -> "TaskForwarder":
        """Create a forwarder with its own client using the configured URL, token and timeout."""
        client = httpx.AsyncClient(timeout=httpx.Timeout(settings.task_api_timeout))
        return cls(client, settings.task_api_url, settings.obot_access_token)

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Cookie": f"{ACCESS_TOKEN_COOKIE}={self._access_token}",
        }

    def _build_request(self, task: TaskRequest) -> httpx.Request:
        if not self.url:
            raise TaskRequestBuildError("Task API URL is not configured")
        try:
            return self._client.build_request(
                "POST",
                self.url,
                json=task.to_payload(),
                headers=self._headers(),
            )
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
            raise TaskRequestBuildError(f"Invalid task API URL {self.url!r}: {exc}") from exc

    async def forward(self, task: TaskRequest) -> httpx.Response:
        """POST the task request and read the full response body.

        The response status is logged but not interpreted. Raises a
        TaskForwardError subclass naming the stage that failed.
        """
        request = self._build_request(task)

        try:
            response = await self._client.send(request, stream=True)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TaskForwardError(f"Task API request to {self.url!r} failed: {exc}") from exc

        try:
            await response.aread()
        except (httpx.HTTPError, httpx.StreamError) as exc:
            raise TaskResponseReadError(
                f"Reading task API response from {self.url!r} failed: {exc}"
            ) from exc
        finally:
            await response.aclose()

        logger.info(
            "Response from task API: %s",
            response.text,
            extra={"status_code": response.status_code},
        )
        return response

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
