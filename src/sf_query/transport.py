"""
An httpx-backed fetcher for the `http_get` option.
"""

from typing import Any

import httpx

from .exceptions import raise_for_status
from .logger import getLogger
from .metrics import parse_api_usage
from .options import HttpGetter

LOGGER = getLogger("transport")


def httpx_getter(client: httpx.Client, resource_name: str = "query") -> HttpGetter:
    """
    Wrap an httpx.Client as a fetcher returning the raw response body.

    Unsuccessful responses raise the matching SalesforceError subclass.
    Timeouts and connection failures surface as httpx exceptions.
    """

    def _get(url: str) -> bytes:
        response = client.get(url)
        raise_for_status(response, resource_name)
        sforce_limit_info = response.headers.get("Sforce-Limit-Info")
        if sforce_limit_info:
            usage = parse_api_usage(sforce_limit_info)
            if usage.api_usage:
                LOGGER.debug(
                    "API usage %d/%d", usage.api_usage.used, usage.api_usage.total
                )
        return response.content

    return _get


def bearer_client(access_token: str, **kwargs: Any) -> httpx.Client:
    """Build an httpx.Client that sends `access_token` as a bearer token."""
    headers = {
        "Accept": "application/json",
        "Authorization": f"Bearer {access_token}",
        **kwargs.pop("headers", {}),
    }
    return httpx.Client(headers=headers, **kwargs)
