"""
Query options and request URL construction.

Options are plain functions that take a ``QueryOptions`` and return a copy
with one field replaced. They are applied in the order given, so when two
options touch the same field the last one wins.
"""

from collections.abc import Callable
from typing import NamedTuple
from urllib.parse import quote_plus

HttpGetter = Callable[[str], bytes]

DATA_PATH = "/services/data"


class QueryOptions(NamedTuple):
    api_version: str
    command: str
    tooling: bool = False
    instance_url: str = ""
    tail: str = ""
    "Raw path override; replaces the composed data path when set"
    querystring: str = ""
    "SOQL text sent as the `q` parameter"
    http_get: HttpGetter | None = None
    max_pages: int | None = None

    @property
    def path(self) -> str:
        if self.tail:
            return self.tail
        command = self.command
        if self.tooling:
            command = "tooling/" + command
        return f"{DATA_PATH}/{self.api_version}/{command}"

    def url(self) -> str:
        query = ""
        if self.querystring:
            query = "?q=" + quote_plus(self.querystring)
        return f"{self.instance_url}{self.path}{query}"

    def next_url(self, next_records_url: str) -> str:
        return f"{self.instance_url}{next_records_url}"


Option = Callable[[QueryOptions], QueryOptions]

DEFAULT_API_VERSION = "v63.0"

DEFAULT_OPTIONS = QueryOptions(api_version=DEFAULT_API_VERSION, command="query")


def resolve_options(
    *options: Option, base: QueryOptions = DEFAULT_OPTIONS
) -> QueryOptions:
    resolved = base
    for option in options:
        resolved = option(resolved)
    return resolved


def all_rows(o: QueryOptions) -> QueryOptions:
    """Use queryAll, which includes deleted and archived records."""
    return o._replace(command="queryAll")


def tooling(o: QueryOptions) -> QueryOptions:
    """Query the Tooling API instead of the data API."""
    return o._replace(tooling=True)


def instance_url(url: str) -> Option:
    def _instance_url(o: QueryOptions) -> QueryOptions:
        return o._replace(instance_url=url)

    return _instance_url


def tail(path: str) -> Option:
    def _tail(o: QueryOptions) -> QueryOptions:
        return o._replace(tail=path)

    return _tail


def api_version(version: str | int | float) -> Option:
    """
    Set the API version segment.
    Strings are used as given ("v63.0"); numbers are formatted (63 -> "v63.0").
    """
    if isinstance(version, bool):
        raise TypeError(f"api_version must be a string or number, got {version!r}")
    if isinstance(version, str):
        segment = version
    else:
        segment = f"v{float(version):.1f}"

    def _api_version(o: QueryOptions) -> QueryOptions:
        return o._replace(api_version=segment)

    return _api_version


def qs(soql: str) -> Option:
    def _qs(o: QueryOptions) -> QueryOptions:
        return o._replace(querystring=soql)

    return _qs


def http_get(getter: HttpGetter) -> Option:
    def _http_get(o: QueryOptions) -> QueryOptions:
        return o._replace(http_get=getter)

    return _http_get


def max_pages(limit: int | None) -> Option:
    if limit is not None and limit < 1:
        raise ValueError(f"max_pages must be at least 1, got {limit}")

    def _max_pages(o: QueryOptions) -> QueryOptions:
        return o._replace(max_pages=limit)

    return _max_pages
