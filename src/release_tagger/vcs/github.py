"""GitHub REST implementation of the repository host.

Uses an ``httpx.AsyncClient``; build one with :func:`build_async_client`
so timeouts and headers are the same everywhere.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from release_tagger.exceptions import HostError
from release_tagger.vcs.host import Commit, CreatedRef, CreatedTag, RepositoryHost, Tag

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"
API_VERSION = "2022-11-28"


def build_async_client(
    token: str,
    *,
    api_url: str = DEFAULT_API_URL,
    timeout: float = 30.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` for the GitHub API.

    Args:
        token: GitHub token used as bearer credential
        api_url: API base URL (GitHub Enterprise uses ``https://host/api/v3``)
        timeout: Per-request timeout in seconds
        transport: Custom transport, e.g. ``httpx.MockTransport`` in tests
    """
    return httpx.AsyncClient(
        base_url=api_url.rstrip("/"),
        timeout=httpx.Timeout(timeout),
        transport=transport,
        headers={
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": API_VERSION,
        },
    )


class GitHubHost(RepositoryHost):
    """Repository host backed by the GitHub REST API."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def list_tags(self, repo: str, *, per_page: int = 100) -> list[Tag]:
        path = f"/repos/{repo}/tags"
        data = await self._request("GET", path, params={"per_page": per_page})
        try:
            return [Tag(name=item["name"], commit_sha=item["commit"]["sha"]) for item in data]
        except (KeyError, TypeError) as e:
            raise _unexpected_payload("GET", path, e) from e

    async def list_commits(self, repo: str, since_sha: str | None = None) -> list[Commit]:
        path = f"/repos/{repo}/commits"
        params = {"sha": since_sha} if since_sha else None
        data = await self._request("GET", path, params=params)
        try:
            return [Commit(sha=item["sha"], message=item["commit"]["message"]) for item in data]
        except (KeyError, TypeError) as e:
            raise _unexpected_payload("GET", path, e) from e

    async def create_tag(
        self,
        repo: str,
        name: str,
        message: str,
        target_sha: str,
    ) -> CreatedTag:
        path = f"/repos/{repo}/git/tags"
        data = await self._request(
            "POST",
            path,
            json={"tag": name, "message": message, "object": target_sha, "type": "commit"},
        )
        try:
            return CreatedTag(tag=data["tag"], sha=data["sha"])
        except (KeyError, TypeError) as e:
            raise _unexpected_payload("POST", path, e) from e

    async def create_ref(self, repo: str, ref: str, sha: str) -> CreatedRef:
        path = f"/repos/{repo}/git/refs"
        data = await self._request("POST", path, json={"ref": ref, "sha": sha})
        try:
            return CreatedRef(ref=data["ref"], url=data.get("url"))
        except (KeyError, TypeError, AttributeError) as e:
            raise _unexpected_payload("POST", path, e) from e

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        """Send a request and decode the JSON body.

        Raises:
            HostError: On transport errors, responses with status >= 400
                and bodies that are not JSON
        """
        logger.debug("%s %s", method, path)
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise HostError(f"{method} {path} failed: {e}") from e

        if response.is_error:
            raise HostError(
                f"{method} {path} returned {response.status_code}: {_error_message(response)}",
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as e:
            raise HostError(
                f"{method} {path} returned invalid JSON",
                status_code=response.status_code,
            ) from e


def _unexpected_payload(method: str, path: str, error: Exception) -> HostError:
    return HostError(f"{method} {path} returned an unexpected payload: {error!r}")


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.reason_phrase
