from collections.abc import Callable

from .exceptions import PageLimitExceeded, QueryConfigurationError
from .logger import getLogger
from .options import Option, all_rows, resolve_options
from .records import Record, decode_page, normalize_records

LOGGER = getLogger("query")

PageCallback = Callable[[Record | None, list[Record]], bool]
"""
Receives (parent, records) for each page and returns True to fetch the next
page. `parent` is reserved for nested paging and is always None.
"""


def query(callback: PageCallback, *options: Option) -> None:
    """
    Execute a query, handing each page of normalized records to `callback`.

    Pages are fetched one at a time. Paging stops when the callback returns
    a falsy value, when the server reports the result as done, or when an
    error is raised. Errors from the configured fetcher propagate unchanged.

    Raises:
        QueryConfigurationError: no fetcher has been configured
        QueryResultDecodeError: a response body is not a query result
        RecordShapeError: a record on the page is malformed; the callback
            is not invoked for that page
        PageLimitExceeded: more pages remain after `max_pages` pages
    """
    opts = resolve_options(*options)
    if opts.http_get is None:
        raise QueryConfigurationError(
            "No HTTP getter configured; pass the http_get(...) option"
        )

    next_url = opts.url()
    page_count = 0
    while True:
        if opts.max_pages is not None and page_count >= opts.max_pages:
            raise PageLimitExceeded(opts.max_pages, next_url)

        LOGGER.debug("Fetching query page %d from %s", page_count + 1, next_url)
        body = opts.http_get(next_url)
        page_count += 1

        page = decode_page(body)
        records = normalize_records(page.records)
        LOGGER.debug(
            "Received %d of %d records (done=%s)",
            len(records),
            page.total_size,
            page.done,
        )

        if not callback(None, records):
            LOGGER.debug("Paging stopped by callback after %d page(s)", page_count)
            return

        if page.done:
            return

        if not page.next_records_url:
            LOGGER.warning(
                "Query page %d is not done but has no nextRecordsUrl; stopping",
                page_count,
            )
            return

        next_url = opts.next_url(page.next_records_url)


def eager(*options: Option) -> list[Record]:
    """Execute a query and return the records from every page, in order."""
    records: list[Record] = []

    def _collect(parent: Record | None, children: list[Record]) -> bool:
        records.extend(children)
        return True

    query(_collect, *options)
    return records


def query_all(*options: Option) -> list[Record]:
    """Like `eager`, but through queryAll so deleted and archived records are included."""
    return eager(all_rows, *options)
