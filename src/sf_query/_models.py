from typing import TypedDict, Union
from typing_extensions import NotRequired

JSONValue = Union[
    None, bool, int, float, str, list["JSONValue"], dict[str, "JSONValue"]
]


class QueryResultJSON(TypedDict):
    done: bool
    totalSize: NotRequired[int]
    nextRecordsUrl: NotRequired[str]
    records: list[dict[str, JSONValue]]
