"""circleci HTTP dispatcher and project slug resolution"""

import logging
from datetime import datetime
from enum import Enum
from typing import Any, TypeVar, Union
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from circleci_client.exceptions import APIError, ProjectSlugError
from circleci_client.settings import (
    CIRCLECI_API_URL,
    CIRCLECI_TOKEN_HEADER,
    Settings,
    settings as default_settings,
)
from circleci_client.types import ProjectSlug, RawProjectSlug, VcsProjectSlug

logger = logging.getLogger(__name__)

ParamValue = Union[str, int, bool, list[str], dict[str, str | int | bool]]
Params = dict[str, ParamValue]

# anything a caller may hand over as a project reference
ProjectSlugLike = Union[ProjectSlug, tuple[str, str, str], str]


class HTTPMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


# query string for reads/deletes, JSON body for writes
_QUERY_METHODS = frozenset({HTTPMethod.GET, HTTPMethod.DELETE})
_BODY_METHODS = frozenset({HTTPMethod.POST, HTTPMethod.PUT})


def quote_segment(value: str) -> str:
    """percent-encode a value for use as a single URL path segment"""
    return quote(value, safe="!~*'()")


def resolve_project_slug(ref: ProjectSlugLike | None) -> ProjectSlug:
    """turn whatever the caller configured into a ProjectSlug variant

    Args:
        ref: a ProjectSlug, a (vcs, org, repo) tuple, a pre-formatted string
             (e.g., "gh/org/repo"), or None

    Returns:
        VcsProjectSlug or RawProjectSlug

    Raises:
        ProjectSlugError: if no usable reference is configured
    """
    match ref:
        case RawProjectSlug(value=""):
            raise ProjectSlugError()
        case VcsProjectSlug() | RawProjectSlug():
            return ref
        case str() if ref:
            return RawProjectSlug(value=ref)
        case (vcs, org, repo):
            try:
                return VcsProjectSlug(vcs=vcs, org=org, repo=repo)
            except ValidationError as e:
                raise ProjectSlugError() from e
        case _:
            raise ProjectSlugError()


def encode_project_slug(slug: ProjectSlug) -> str:
    """join a project slug and percent-encode it, embedded slashes included"""
    match slug:
        case VcsProjectSlug(vcs=vcs, org=org, repo=repo):
            joined = f"{vcs}/{org}/{repo}"
        case RawProjectSlug(value=value):
            joined = value
    return quote_segment(joined)


def compact_params(params: dict[str, Any]) -> Params:
    """drop filters the caller did not supply

    Args:
        params: mapping of wire parameter name (e.g., "page-token") to value

    None, False and empty strings are left out of the request entirely;
    datetimes are sent as ISO-8601 strings.
    """
    compacted: Params = {}
    for name, value in params.items():
        if value is None or value is False or value == "":
            continue
        if isinstance(value, datetime):
            value = value.isoformat()
        compacted[name] = value
    return compacted


_ClientT = TypeVar("_ClientT", bound="BaseClient")


class BaseClient:
    """state and request plumbing shared by every endpoint family"""

    base_url: str = CIRCLECI_API_URL

    def __init__(
        self,
        api_key: str,
        project_slug: ProjectSlugLike | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_key = api_key
        self.project_slug = project_slug
        self._http_client = http_client
        self._owns_http_client = False

    @classmethod
    def from_settings(
        cls: type[_ClientT], settings: Settings | None = None, **kwargs: Any
    ) -> _ClientT:
        """build a client from environment / .env configuration

        Raises:
            ValueError: if no token is configured
        """
        settings = settings or default_settings
        if not settings.circleci_token:
            raise ValueError("CIRCLECI_TOKEN is not set")
        return cls(
            settings.circleci_token,
            settings.circleci_project_slug,
            **kwargs,
        )

    async def __aenter__(self):
        # one pooled connection for the lifetime of the block
        if self._http_client is None:
            self._http_client = httpx.AsyncClient()
            self._owns_http_client = True
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
            self._owns_http_client = False

    def project_slug_path(self) -> str:
        """URL-safe path segment for the configured project

        Raises:
            ProjectSlugError: if no project slug is configured
        """
        return encode_project_slug(resolve_project_slug(self.project_slug))

    async def _send(self, method: HTTPMethod, url: str, **kwargs: Any) -> httpx.Response:
        if self._http_client is not None:
            return await self._http_client.request(method.value, url, **kwargs)
        async with httpx.AsyncClient() as client:
            return await client.request(method.value, url, **kwargs)

    async def _request(
        self,
        method: HTTPMethod,
        path: str,
        success_status: int,
        params: Params | None = None,
    ) -> dict[str, Any]:
        """make one request to the circleci API

        Args:
            method: HTTP method
            path: path relative to the API base URL (already encoded)
            success_status: the status this endpoint answers with on success
            params: query parameters (GET/DELETE) or JSON body (POST/PUT)

        Returns:
            parsed JSON body

        Raises:
            APIError: if the response status differs from success_status
        """
        url = f"{self.base_url}/{path}"
        headers = {CIRCLECI_TOKEN_HEADER: self._api_key}
        kwargs: dict[str, Any] = {}

        if params:
            if method in _QUERY_METHODS:
                kwargs["params"] = params
            elif method in _BODY_METHODS:
                kwargs["json"] = params
                headers["Content-Type"] = "application/json"

        logger.debug("%s %s", method.value, url)
        response = await self._send(method, url, headers=headers, **kwargs)
        logger.debug("%s %s -> %d", method.value, url, response.status_code)

        # error bodies carry the message, so parse before checking the status
        data = response.json()

        if response.status_code != success_status:
            message = data.get("message") if isinstance(data, dict) else None
            raise APIError(message, response.status_code, response)

        return data
