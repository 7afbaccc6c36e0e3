import json
from unittest.mock import Mock

import pytest

INSTANCE_URL = "https://example.my.salesforce.com"


def _account(n: int):
    return {
        "attributes": {
            "type": "Account",
            "url": f"/services/data/v63.0/sobjects/Account/001XX00000000{n:02d}",
        },
        "Id": f"001XX00000000{n:02d}",
        "Name": f"Test Account {n}",
    }


@pytest.fixture
def three_pages():
    """Raw JSON bodies for a query result split across three batches"""
    return [
        json.dumps(
            {
                "done": False,
                "totalSize": 5,
                "nextRecordsUrl": "/services/data/v63.0/query/01gRO0000016PIAYA2-2",
                "records": [_account(1), _account(2)],
            }
        ).encode(),
        json.dumps(
            {
                "done": False,
                "totalSize": 5,
                "nextRecordsUrl": "/services/data/v63.0/query/01gRO0000016PIAYA2-4",
                "records": [_account(3), _account(4)],
            }
        ).encode(),
        json.dumps(
            {
                "done": True,
                "totalSize": 5,
                "records": [_account(5)],
            }
        ).encode(),
    ]


@pytest.fixture
def mock_getter(three_pages):
    """A fetcher that serves the three pages in order"""
    return Mock(side_effect=three_pages)
