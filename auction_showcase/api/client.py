"""Shared httpx plumbing for the source and destination APIs."""

from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, AsyncIterator, Mapping, MutableMapping

import httpx

from auction_showcase.errors import DecodeError, NetworkError, ResponseStatusError
from auction_showcase.logging import get_logger


@dataclass
class ServiceRequest:
    """Description of a request to send to a JSON service."""

    method: str
    path: str = ""
    content: str | bytes | None = None
    headers: Mapping[str, str] | None = None


class JsonServiceClient:
    """Thin wrapper around httpx that maps transport and decode failures to our errors.

    An ``httpx.AsyncClient`` may be injected (tests pass one built on
    ``httpx.MockTransport``); otherwise one is created by :meth:`lifecycle`,
    following redirects, on ``transport`` when given, and closed when the
    context exits.
    """

    def __init__(
        self,
        base_url: str,
        *,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        default_headers: Mapping[str, str] | None = None,
        component: str = "json_service_client",
    ) -> None:
        self._base_url = base_url
        self._client = client
        self._transport = transport
        self._default_headers = dict(default_headers or {})
        self._default_headers.setdefault("Accept", "application/json")
        self._logger = get_logger(__name__).bind(component=component)

    @property
    def base_url(self) -> str:
        return self._base_url.rstrip("/")

    def url_for(self, path: str) -> str:
        if not path:
            return self.base_url
        return f"{self.base_url}/{path.lstrip('/')}"

    @asynccontextmanager
    async def lifecycle(self) -> AsyncIterator["JsonServiceClient"]:
        """Ensure an AsyncClient is available for the duration of the context."""

        if self._client is not None:
            yield self
            return

        async with httpx.AsyncClient(transport=self._transport, follow_redirects=True) as client:
            self._client = client
            try:
                yield self
            finally:
                self._client = None

    async def request(self, request: ServiceRequest) -> httpx.Response:
        """Perform a raw request, raising :class:`NetworkError` on transport failures."""

        if self._client is None:
            raise RuntimeError(f"{type(self).__name__}.lifecycle must be entered before requesting")

        url = self.url_for(request.path)
        headers: MutableMapping[str, str] = dict(self._default_headers)
        if request.headers:
            headers |= request.headers

        self._logger.debug(
            "service_request",
            method=request.method,
            url=url,
            has_content=request.content is not None,
        )

        try:
            return await self._client.request(
                request.method,
                url,
                content=request.content,
                headers=headers,
            )
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise NetworkError(f"{request.method} {url} failed: {exc!r}") from exc

    async def request_json(self, request: ServiceRequest) -> Any:
        """Perform a request and return the decoded JSON body."""

        response = await self.request(request)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            self._logger.warning(
                "service_request_failed",
                status_code=exc.response.status_code,
                url=str(exc.request.url),
            )
            raise ResponseStatusError(
                f"{request.method} {exc.request.url} returned HTTP {exc.response.status_code}",
                status_code=exc.response.status_code,
                url=str(exc.request.url),
            ) from exc

        try:
            return response.json()
        except ValueError as exc:
            raise DecodeError(f"{request.method} {response.request.url} returned invalid JSON: {exc}") from exc

    async def get_json(self, path: str) -> Any:
        """Convenience helper for GET JSON endpoints."""

        return await self.request_json(ServiceRequest(method="GET", path=path))

    async def post_json(
        self,
        path: str,
        *,
        body: str | bytes,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """POST an already-serialized JSON body and return the decoded response."""

        merged: dict[str, str] = {"Content-Type": "application/json"}
        if headers:
            merged |= headers
        return await self.request_json(ServiceRequest(method="POST", path=path, content=body, headers=merged))
