"""REST comment source.

Talks to the news platform API over httpx. Every response wraps its
payload in ``{"data": ...}``; failures carry ``error`` or ``message``.
"""

from typing import Any, Optional

import httpx
import logfire

from discuss.adapter.error import AdapterError, NetworkError, RemoteError, is_transient
from discuss.adapter.http.mappers import (
    create_payload,
    moderation_payload,
    update_payload,
    wire_to_comment,
    wire_to_moderation_result,
    wire_to_page,
    wire_to_statistics,
)
from discuss.domain.model import (
    Comment,
    CommentPage,
    CommentStatistics,
    ModerationResult,
)
from discuss.domain.repository import CommentSource, SessionProvider
from discuss.domain.value import (
    CommentBody,
    CommentId,
    CommentQuery,
    ContentItemId,
    ModerationAction,
)


class HttpCommentSource(CommentSource):
    """CommentSource backed by the REST API.

    Reads are retried on transient failures up to ``max_read_retries``
    times. Writes are sent exactly once: they are not safe to repeat.
    """

    def __init__(
        self,
        base_url: str,
        session: SessionProvider,
        timeout: float = 10.0,
        max_read_retries: int = 3,
    ) -> None:
        """Initialize HTTP comment source.

        Args:
            base_url: API root (e.g. ``http://localhost:3000/api``)
            session: Supplies the bearer token for each request
            timeout: Per-request transport timeout in seconds
            max_read_retries: Extra attempts for failed reads
        """
        self.base_url = base_url
        self.session = session
        self.timeout = timeout
        self.max_read_retries = max_read_retries

    async def list_comments(
        self, content_item_id: ContentItemId, query: CommentQuery
    ) -> CommentPage:
        data = await self._read(
            f"/comments/news/{content_item_id}", params=query.as_params()
        )
        return wire_to_page(data)

    async def get_comment(self, comment_id: CommentId) -> Comment:
        data = await self._read(f"/comments/{comment_id}")
        return wire_to_comment(data)

    async def create_comment(
        self,
        content_item_id: ContentItemId,
        body: CommentBody,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        data = await self._send(
            "POST",
            "/comments",
            json=create_payload(content_item_id, body, parent_id),
        )
        return wire_to_comment(data)

    async def update_comment(self, comment_id: CommentId, body: CommentBody) -> Comment:
        data = await self._send(
            "PUT", f"/comments/{comment_id}", json=update_payload(body)
        )
        return wire_to_comment(data)

    async def delete_comment(self, comment_id: CommentId) -> None:
        await self._send("DELETE", f"/comments/{comment_id}")

    async def moderate_comments(
        self,
        comment_ids: list[CommentId],
        action: ModerationAction,
        reason: Optional[str] = None,
    ) -> ModerationResult:
        data = await self._send(
            "POST",
            "/comments/moderate",
            json=moderation_payload(comment_ids, action, reason),
        )
        return wire_to_moderation_result(data)

    async def get_statistics(self) -> CommentStatistics:
        data = await self._read("/comments/statistics")
        return wire_to_statistics(data)

    async def _read(self, path: str, params: Optional[dict[str, str]] = None) -> Any:
        """GET with bounded retries on transient failures."""
        attempts = 1 + self.max_read_retries
        for attempt in range(1, attempts + 1):
            try:
                return await self._send("GET", path, params=params)
            except AdapterError as e:
                if attempt < attempts and is_transient(e):
                    logfire.warn(
                        "Retrying comment read",
                        path=path,
                        attempt=attempt,
                        error=str(e),
                    )
                    continue
                raise

    async def _send(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, str]] = None,
        json: Optional[dict[str, Any]] = None,
    ) -> Any:
        """Send one request and unwrap the ``data`` field.

        Raises:
            NetworkError: If no response was received
            RemoteError: If the API answered with an error status
        """
        headers = {"Content-Type": "application/json"}
        token = self.session.access_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"

        try:
            async with httpx.AsyncClient(
                base_url=self.base_url, timeout=self.timeout
            ) as client:
                response = await client.request(
                    method, path, params=params, json=json, headers=headers
                )
        except httpx.TransportError as e:
            raise NetworkError(f"{method} {path} failed: {e}") from e

        if response.is_error:
            payload = _decode(response)
            message = None
            if isinstance(payload, dict):
                message = payload.get("error") or payload.get("message")
            logfire.warn(
                "Comment API error",
                method=method,
                path=path,
                status_code=response.status_code,
                message=message,
            )
            raise RemoteError(response.status_code, message, payload)

        if response.status_code == 204 or not response.content:
            return None
        body = _decode(response)
        if isinstance(body, dict) and "data" in body:
            return body["data"]
        return body


def _decode(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None
