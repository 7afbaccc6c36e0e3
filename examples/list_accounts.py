import os

from sf_query import (
    bearer_client,
    eager,
    http_get,
    httpx_getter,
    instance_url,
    qs,
    query,
)

INSTANCE_URL = os.environ["SF_INSTANCE_URL"]
ACCESS_TOKEN = os.environ["SF_ACCESS_TOKEN"]


def print_first_pages(client, pages: int = 2):
    seen = 0

    def on_page(parent, records):
        nonlocal seen
        seen += 1
        for record in records:
            print(
                record.attributes.type,
                record.fields["Id"],
                record.fields["Name"],
                sep=" | ",
            )
        return seen < pages

    query(
        on_page,
        instance_url(INSTANCE_URL),
        qs("SELECT Id, Name FROM Account ORDER BY Name"),
        http_get(httpx_getter(client)),
    )


with bearer_client(ACCESS_TOKEN, timeout=60) as client:
    print_first_pages(client)

    users = eager(
        instance_url(INSTANCE_URL),
        qs("SELECT Id, Username FROM User WHERE IsActive = true"),
        http_get(httpx_getter(client)),
    )
    print(len(users), "Active Users")
