"""Todo REST API adapter - HTTP client for task fetching and mutation."""

import logging

import requests

from taskdeck.config import Config, Tokens, load_config
from taskdeck.core.tasks import Status, Task

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Raised when the API call fails or reports success=false."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class AuthenticationError(ApiError):
    """Raised when no token is available or the API rejects it."""

    pass


class TodoApiAdapter:
    """
    Todo API adapter.

    Implements TaskRepository protocol. Unwraps the {success, message, data}
    envelope and maps records to Task. No business logic - just I/O.
    """

    def __init__(
        self,
        config: Config | None = None,
        tokens: Tokens | None = None,
        session: requests.Session | None = None,
    ):
        self.config = config or load_config()
        self.tokens = tokens or Tokens.load()
        self._session = session or requests.Session()

    def _headers(self) -> dict[str, str]:
        if not self.tokens.access_token:
            raise AuthenticationError("No access token. Set TASKDECK_TOKEN or save a token first.")
        return {
            "Authorization": f"Bearer {self.tokens.access_token}",
            "Content-Type": "application/json",
        }

    def _api_request(
        self,
        method: str,
        endpoint: str,
        json: dict | None = None,
        params: dict | None = None,
    ) -> dict | list | None:
        """Make an authenticated API request and return the envelope's data."""
        url = f"{self.config.api_url}{endpoint}"
        logger.debug(f"{method} {url}")
        try:
            resp = self._session.request(
                method,
                url,
                headers=self._headers(),
                json=json,
                params=params,
                timeout=self.config.request_timeout,
            )
        except requests.RequestException as e:
            raise ApiError(f"{method} {endpoint} failed: {e}") from e

        if resp.status_code == 401:
            raise AuthenticationError("Token rejected by the API.", status_code=401)
        if resp.status_code >= 400:
            raise ApiError(
                f"{method} {endpoint} returned {resp.status_code}: {resp.text}",
                status_code=resp.status_code,
            )

        if not resp.content:
            return None
        try:
            body = resp.json()
        except ValueError as e:
            raise ApiError(f"{method} {endpoint} returned invalid JSON") from e

        if isinstance(body, dict) and "success" in body:
            if not body["success"]:
                raise ApiError(body.get("message") or "Request failed", status_code=resp.status_code)
            return body.get("data")
        return body

    def _to_task(self, data: dict) -> Task:
        try:
            return Task.from_api(data)
        except (KeyError, ValueError, TypeError) as e:
            raise ApiError(f"Malformed task record: {e}") from e

    def fetch_all(self) -> list[Task]:
        """Fetch every task. Records with unknown enum values are skipped."""
        data = self._api_request("GET", "/todos") or []
        if not isinstance(data, list):
            raise ApiError(f"Expected a list of tasks, got {type(data).__name__}")
        tasks = []
        for item in data:
            if not isinstance(item, dict):
                logger.warning(f"Skipping malformed task record {item!r}")
                continue
            try:
                tasks.append(Task.from_api(item))
            except (KeyError, ValueError, TypeError) as e:
                logger.warning(f"Skipping malformed task record {item.get('id')!r}: {e}")
        return tasks

    def fetch_one(self, task_id: int) -> Task:
        return self._to_task(self._api_request("GET", f"/todos/{task_id}"))

    def create(self, task: Task) -> Task:
        return self._to_task(self._api_request("POST", "/todos", json=task.to_request()))

    def update(self, task: Task) -> Task:
        return self._to_task(
            self._api_request("PUT", f"/todos/{task.id}", json=task.to_request())
        )

    def update_status(self, task_id: int, status: Status) -> Task:
        return self._to_task(
            self._api_request("PATCH", f"/todos/{task_id}/status", params={"status": status.value})
        )

    def delete(self, task_id: int) -> None:
        self._api_request("DELETE", f"/todos/{task_id}")
