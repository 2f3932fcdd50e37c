"""
Thin async adapter over GitHub's REST user endpoints.

One method call issues exactly one HTTP request. Nothing is retried or cached, and requests
are unauthenticated, so GitHub's anonymous rate limits apply.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from config import Settings

logger = logging.getLogger(__name__)

SEARCH_QUALIFIERS = "in:login name email type:user"


class UpstreamError(Exception):
    """GitHub call failed: transport error, non-2xx status, or an unreadable body."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class UpstreamNotFoundError(UpstreamError):
    pass


@dataclass
class UpstreamResponse:
    status_code: int
    body: Any


def build_search_query(search: str) -> str:
    return f"{search} {SEARCH_QUALIFIERS}"


def _drop_none(params: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in params.items() if v is not None}


class GitHubClient:
    def __init__(self, http: httpx.AsyncClient):
        self._http = http

    @classmethod
    def from_settings(cls, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> "GitHubClient":
        http = httpx.AsyncClient(
            base_url=settings.github_api_url,
            headers={
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": settings.github_api_version,
                "User-Agent": settings.github_user_agent,
            },
            transport=transport,
        )
        return cls(http)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def list_users(self, since: Optional[str] = None, per_page: Optional[str] = None) -> UpstreamResponse:
        return await self._get("/users", _drop_none({"since": since, "per_page": per_page}))

    async def search_users(
        self,
        search: str,
        sort: Optional[str] = None,
        order: Optional[str] = None,
        page: Optional[str] = None,
        per_page: Optional[str] = None,
    ) -> UpstreamResponse:
        params = _drop_none({
            "q": build_search_query(search),
            "sort": sort,
            "order": order,
            "page": page,
            "per_page": per_page,
        })
        return await self._get("/search/users", params)

    async def get_user(self, username: str) -> UpstreamResponse:
        return await self._get(f"/users/{username}")

    async def _get(self, path: str, params: Optional[dict[str, Any]] = None) -> UpstreamResponse:
        try:
            resp = await self._http.get(path, params=params)
        except httpx.HTTPError as e:
            logger.warning("GitHub request failed: %s", e, extra={"upstream_path": path})
            raise UpstreamError(f"GitHub request to {path} failed: {e}") from e

        if resp.status_code == 404:
            raise UpstreamNotFoundError(f"GitHub returned 404 for {path}", status_code=404)
        if not resp.is_success:
            logger.warning(
                "GitHub returned %s for %s",
                resp.status_code,
                path,
                extra={"upstream_path": path, "upstream_status": resp.status_code},
            )
            raise UpstreamError(f"GitHub returned {resp.status_code} for {path}", status_code=resp.status_code)

        try:
            body = resp.json()
        except ValueError as e:
            logger.warning("GitHub returned a non-JSON body for %s", path, extra={"upstream_path": path})
            raise UpstreamError(f"GitHub returned a non-JSON body for {path}", status_code=resp.status_code) from e
        return UpstreamResponse(status_code=resp.status_code, body=body)
