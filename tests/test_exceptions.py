import httpx
import pytest

from sf_query import exceptions
from sf_query.exceptions import (
    QueryResultDecodeError,
    RecordShapeError,
    SalesforceError,
    SalesforceGeneralError,
    SalesforceQueryError,
    SalesforceResourceNotFound,
    raise_for_status,
)

QUERY_URL = "https://example.my.salesforce.com/services/data/v63.0/query"


def _response(status_code: int, url: str = QUERY_URL, method: str = "GET", text="[]"):
    return httpx.Response(
        status_code, text=text, request=httpx.Request(method, url)
    )


@pytest.mark.parametrize(
    "status_code,class_name",
    [
        (400, "SalesforceMalformedRequest"),
        (401, "SalesforceExpiredSession"),
        (403, "SalesforceRefusedRequest"),
        (404, "SalesforceResourceNotFound"),
        (405, "SalesforceMethodNotAllowedForResource"),
        (409, "SalesforceApiVersionIncompatible"),
        (410, "SalesforceResourceRemoved"),
        (414, "SalesforceUriLimitExceeded"),
        (500, "SalesforceServerError"),
        (502, "SalesforceEdgeCommFailure"),
        (503, "SalesforceServerUnavailable"),
        (418, "SalesforceGeneralError"),
        (429, "SalesforceGeneralError"),
    ],
)
def test_status_code_mapping(status_code, class_name):
    """Test the exception class raised for each error status"""
    response = _response(
        status_code, text='[{"errorCode": "X", "message": "failed"}]'
    )

    with pytest.raises(SalesforceError) as excinfo:
        raise_for_status(response, "query")

    error = excinfo.value
    assert type(error) is getattr(exceptions, class_name)
    assert error.status_code == status_code
    assert error.resource_name == "query"
    assert error.url_path == "/services/data/v63.0/query"
    assert error.method == "GET"
    assert error.content == '[{"errorCode": "X", "message": "failed"}]'


@pytest.mark.parametrize("status_code", [200, 204])
def test_successful_status_is_ignored(status_code):
    """Test that 2xx responses pass through"""
    assert raise_for_status(_response(status_code), "query") is None


def test_not_found_message():
    """Test the message of a 404 for a named resource"""
    with pytest.raises(SalesforceResourceNotFound) as excinfo:
        raise_for_status(_response(404), "Account")

    message = str(excinfo.value)
    assert "Resource Account Not Found" in message
    assert "(404)" in message
    assert "/services/data/v63.0/query" in message
    assert repr(excinfo.value) == f"SalesforceResourceNotFound({message!r})"


def test_general_error_shortens_long_paths():
    """Test that paths over 255 characters are cut in the message"""
    long_url = QUERY_URL + "/" + "a" * 300
    with pytest.raises(SalesforceGeneralError) as excinfo:
        raise_for_status(_response(418, url=long_url, method="post"), "query")

    message = str(excinfo.value)
    assert "a" * 300 not in message
    assert "..." in message
    assert "POST /services/data/v63.0/query/" in message


def test_query_error_hierarchy():
    """Test that decode and shape errors are also ValueErrors"""
    assert issubclass(QueryResultDecodeError, SalesforceQueryError)
    assert issubclass(QueryResultDecodeError, ValueError)
    assert issubclass(RecordShapeError, ValueError)
    error = RecordShapeError("bad", {"attributes": "x"})
    assert error.record == {"attributes": "x"}
    assert str(error) == "bad"
