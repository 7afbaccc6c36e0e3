"""
Exceptions raised while building, fetching and normalizing query results.

Errors raised by the injected fetcher are never wrapped by the pagination
loop. The HTTP error classes below are what the bundled httpx transport
raises for unsuccessful responses.
"""

from typing import Any

import httpx


class SalesforceQueryError(Exception):
    """Base class for failures detected by the query executor itself."""


class QueryConfigurationError(SalesforceQueryError):
    """The resolved options cannot drive a query."""


class QueryResultDecodeError(SalesforceQueryError, ValueError):
    """A response body did not decode into a query result page."""

    def __init__(self, message: str, body: bytes | str | None = None):
        super().__init__(message)
        self.body = body


class RecordShapeError(SalesforceQueryError, ValueError):
    """A raw record's 'attributes' block is missing or malformed."""

    def __init__(self, message: str, record: Any):
        super().__init__(message)
        self.record = record


class PageLimitExceeded(SalesforceQueryError):
    def __init__(self, max_pages: int, next_url: str):
        super().__init__(
            f"Query did not complete within {max_pages} page(s); "
            f"next page would have been {next_url}"
        )
        self.max_pages = max_pages
        self.next_url = next_url


class SalesforceError(Exception):
    """Base Salesforce API exception"""

    message = "Unknown error occurred for {url_path}. Response content: {content}"

    def __init__(
        self,
        status_code: int,
        resource_name: str,
        url_path: str,
        method: str,
        content: str,
    ):
        self.status_code = status_code
        self.resource_name = resource_name
        self.url_path = url_path
        self.method = method
        self.content = content
        super().__init__(str(self))

    def __str__(self):
        return self.message.format(
            url_path=self.url_path,
            content=self.content,
            resource_name=self.resource_name,
            method=self.method,
        ) + f" ({self.status_code})"

    def __repr__(self):
        return f"{type(self).__name__}({str(self)!r})"


class SalesforceMalformedRequest(SalesforceError):
    message = "Malformed request {url_path}. Response content: {content}"


class SalesforceExpiredSession(SalesforceError):
    message = "Expired session for {url_path}. Response content: {content}"


class SalesforceRefusedRequest(SalesforceError):
    message = "Request refused for {url_path}. Response content: {content}"


class SalesforceResourceNotFound(SalesforceError):
    message = "Resource {resource_name} Not Found at {url_path}. Response content: {content}"


class SalesforceMethodNotAllowedForResource(SalesforceError):
    message = "HTTP Method {method} not allowed for {url_path}. Response content: {content}"


class SalesforceApiVersionIncompatible(SalesforceError):
    message = "API version incompatible for {url_path}. Response content: {content}"


class SalesforceResourceRemoved(SalesforceError):
    message = "Resource removed from {url_path}. Response content: {content}"


class SalesforceUriLimitExceeded(SalesforceError):
    message = "URI length exceeds limit for {url_path}. Response content: {content}"


class SalesforceServerError(SalesforceError):
    message = "Internal server error for {url_path}. Response content: {content}"


class SalesforceEdgeCommFailure(SalesforceError):
    message = "Edge communication failure for {url_path}. Response content: {content}"


class SalesforceServerUnavailable(SalesforceError):
    message = "Server unavailable for {url_path}. Response content: {content}"


class SalesforceGeneralError(SalesforceError):
    message = "Error Code {status_code}. {method} {url_path}. Response content: {content}"

    def __str__(self):
        url_path = self.url_path
        if len(url_path) > 255:
            url_path = url_path[:252] + "..."
        return self.message.format(
            status_code=self.status_code,
            method=self.method.upper(),
            url_path=url_path,
            content=self.content,
        )


_STATUS_EXCEPTIONS: dict[int, type[SalesforceError]] = {
    400: SalesforceMalformedRequest,
    401: SalesforceExpiredSession,
    403: SalesforceRefusedRequest,
    404: SalesforceResourceNotFound,
    405: SalesforceMethodNotAllowedForResource,
    409: SalesforceApiVersionIncompatible,
    410: SalesforceResourceRemoved,
    414: SalesforceUriLimitExceeded,
    500: SalesforceServerError,
    502: SalesforceEdgeCommFailure,
    503: SalesforceServerUnavailable,
}


def raise_for_status(response: httpx.Response, resource_name: str = ""):
    """Raise the SalesforceError subclass matching an unsuccessful response."""
    if response.is_success:
        return
    exc_type = _STATUS_EXCEPTIONS.get(response.status_code, SalesforceGeneralError)
    raise exc_type(
        response.status_code,
        resource_name,
        response.url.path,
        response.request.method,
        response.text,
    )
