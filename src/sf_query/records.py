"""
Decoding of query result pages and normalization of their records.
"""

from collections.abc import Iterable, Mapping
import json
from typing import Any, NamedTuple

from ._models import JSONValue, QueryResultJSON
from .exceptions import QueryResultDecodeError, RecordShapeError

ATTRIBUTES_KEY = "attributes"


class RecordAttributes(NamedTuple):
    type: str
    url: str


class Record(NamedTuple):
    """
    A single query result record.

    Attributes:
        attributes (RecordAttributes): sObject type name and canonical URL
        fields (dict[str, JSONValue]): every key except 'attributes', in
            the order the API returned them. Nested values (relationship
            fields, subquery results) are left as decoded.
        raw (dict[str, JSONValue]): the record exactly as it was received
    """

    attributes: RecordAttributes
    fields: dict[str, JSONValue]
    raw: dict[str, JSONValue]


class QueryPage(NamedTuple):
    """One batch returned by the query resource."""

    done: bool
    "Indicates whether all records have been retrieved (True) or if more batches exist (False)"
    total_size: int
    "The total number of records that match the query criteria"
    next_records_url: str
    "Path to the next batch of records; empty when none remain"
    records: list[dict[str, JSONValue]]


def _attributes_of(raw: Mapping[str, Any]) -> RecordAttributes:
    if ATTRIBUTES_KEY not in raw:
        raise RecordShapeError(f"Record has no '{ATTRIBUTES_KEY}' key", raw)
    attrs = raw[ATTRIBUTES_KEY]
    if not isinstance(attrs, Mapping):
        raise RecordShapeError(
            f"Record '{ATTRIBUTES_KEY}' must be an object, "
            f"got {type(attrs).__name__}",
            raw,
        )
    for key in ("type", "url"):
        if not isinstance(attrs.get(key), str):
            raise RecordShapeError(
                f"Record '{ATTRIBUTES_KEY}.{key}' must be a string, "
                f"got {type(attrs.get(key)).__name__}",
                raw,
            )
    return RecordAttributes(attrs["type"], attrs["url"])


def normalize_record(raw: Mapping[str, Any]) -> Record:
    if not isinstance(raw, Mapping):
        raise RecordShapeError(
            f"Record must be an object, got {type(raw).__name__}", raw
        )
    attributes = _attributes_of(raw)
    fields = {key: value for key, value in raw.items() if key != ATTRIBUTES_KEY}
    return Record(attributes, fields, raw)  # type: ignore[arg-type]


def normalize_records(raws: Iterable[Mapping[str, Any]]) -> list[Record]:
    # a single malformed record fails the whole batch
    return [normalize_record(raw) for raw in raws]


def decode_page(body: bytes | str) -> QueryPage:
    """
    Decode a query response body into a QueryPage.

    Raises:
        QueryResultDecodeError: the body is not JSON, or not shaped like a
            query result.
    """
    try:
        payload: QueryResultJSON = json.loads(body)
    except (ValueError, TypeError, RecursionError) as e:
        raise QueryResultDecodeError(f"Query response is not valid JSON: {e}", body) from e

    if not isinstance(payload, dict):
        raise QueryResultDecodeError(
            f"Query response must be a JSON object, got {type(payload).__name__}",
            body,
        )

    done = payload.get("done")
    if not isinstance(done, bool):
        raise QueryResultDecodeError("Query response 'done' must be a boolean", body)

    total_size = payload.get("totalSize", 0)
    if isinstance(total_size, bool) or not isinstance(total_size, int):
        raise QueryResultDecodeError(
            "Query response 'totalSize' must be an integer", body
        )

    next_records_url = payload.get("nextRecordsUrl")
    if next_records_url is None:
        next_records_url = ""
    if not isinstance(next_records_url, str):
        raise QueryResultDecodeError(
            "Query response 'nextRecordsUrl' must be a string", body
        )

    records = payload.get("records")
    if records is None:
        records = []
    if not isinstance(records, list):
        raise QueryResultDecodeError("Query response 'records' must be a list", body)

    return QueryPage(done, total_size, next_records_url, records)
