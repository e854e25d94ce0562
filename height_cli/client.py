"""Authenticated GET requests against the Height REST API.

Every call is a single round trip: the status class is checked before the body
is decoded, and the decoded JSON is validated against the caller's declared
result type so malformed or error payloads fail loudly.
"""

import logging
from collections.abc import Callable
from typing import Any, TypeVar
from urllib.parse import urlencode

import requests
from pydantic import TypeAdapter, ValidationError

from height_cli.context import AppContext
from height_cli.exceptions import (
    ApiError,
    AuthenticationError,
    IntegrationError,
    RateLimitError,
    ResponseValidationError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

ParamsBuilder = Callable[[dict[str, str]], Any]


def build_url(base_url: str, pathname: str, params: ParamsBuilder | None = None) -> str:
    """Join base URL and pathname, appending a query string built by `params` if it adds anything."""
    url = f"{base_url}{pathname}"
    if params is not None:
        query: dict[str, str] = {}
        params(query)
        if query:
            url = f"{url}?{urlencode(query)}"
    return url


def _auth_headers(api_key: str) -> dict:
    return {"Authorization": f"api-key {api_key}"}


def _handle_response(resp: requests.Response) -> Any:
    if resp.status_code in (401, 403):
        raise AuthenticationError(
            f"Height rejected the API key (HTTP {resp.status_code}). "
            "Delete the stored key file and run again to re-enter it."
        )
    if resp.status_code == 429:
        raise RateLimitError("Height API rate limit exceeded. Try again later.")
    if resp.status_code >= 400:
        raise ApiError(resp.status_code, resp.text)
    try:
        return resp.json()
    except ValueError as e:
        raise IntegrationError(f"Height API returned a non-JSON body: {resp.text[:200]}") from e


def api_request(
    ctx: AppContext,
    pathname: str,
    result_type: type[T] | Any = Any,
    params: ParamsBuilder | None = None,
) -> T:
    """GET `pathname` from the Height API and return the body validated as `result_type`."""
    url = build_url(ctx.settings.api_base_url, pathname, params)
    logger.debug("GET %s", url)
    try:
        resp = ctx.session.get(url, headers=_auth_headers(ctx.api_key), timeout=ctx.settings.request_timeout)
    except requests.RequestException as e:
        raise IntegrationError(f"Request to {url} failed: {e}") from e

    data = _handle_response(resp)
    try:
        return TypeAdapter(result_type).validate_python(data)
    except ValidationError as e:
        raise ResponseValidationError(pathname, e.errors()) from e
