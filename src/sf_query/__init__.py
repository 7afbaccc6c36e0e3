from .query import query, eager, query_all, PageCallback
from .options import (
    DEFAULT_OPTIONS,
    QueryOptions,
    all_rows,
    api_version,
    http_get,
    instance_url,
    max_pages,
    qs,
    tail,
    tooling,
)
from .records import Record, RecordAttributes
from .transport import httpx_getter, bearer_client

__all__ = [
    "query",
    "eager",
    "query_all",
    "PageCallback",
    "DEFAULT_OPTIONS",
    "QueryOptions",
    "all_rows",
    "api_version",
    "http_get",
    "instance_url",
    "max_pages",
    "qs",
    "tail",
    "tooling",
    "Record",
    "RecordAttributes",
    "httpx_getter",
    "bearer_client",
]
