from typing import Any, Optional, Protocol

import requests
from pydantic import ValidationError

from reconciler.errors import TooManyLoopsError, TransportFailure
from reconciler.models import ContinuationToken, EventFilter, EventsPage, RawEvent

# starknet nodes cap chunk_size, 500 is accepted everywhere we read from
PAGE_SIZE = 500


def rpc_call(url: str, method: str, params: dict[str, Any], timeout: int = 60) -> Any:
    """
    Send a single JSON-RPC 2.0 request and return its `result`.
    Any failure (network, HTTP status, malformed body, RPC error) is fatal for the run
    and surfaces as a `TransportFailure`. We do not retry here.
    """
    payload = {"jsonrpc": "2.0", "id": 1, "method": method, "params": params}
    try:
        res = requests.post(url, json=payload, timeout=timeout)
        res.raise_for_status()
        response = res.json()
    except (requests.RequestException, ValueError) as e:
        raise TransportFailure(f"{method} to {url} failed: {e}") from e

    if not isinstance(response, dict):
        raise TransportFailure(f"Unexpected response for {method} from {url}")
    if "error" in response:
        raise TransportFailure(f"Error in {method} to {url}: {response['error']}")
    if "result" not in response:
        raise TransportFailure(f"No result for {method} from {url}")
    return response["result"]


class EventSource(Protocol):
    def fetch_page(
        self,
        event_filter: EventFilter,
        continuation_token: Optional[ContinuationToken],
        page_size: int,
    ) -> EventsPage:
        ...


class StarknetEventSource:
    """Reads events from a single starknet JSON-RPC endpoint"""

    def __init__(self, rpc_url: str, timeout: int = 60):
        self.rpc_url = rpc_url
        self.timeout = timeout

    def fetch_page(
        self,
        event_filter: EventFilter,
        continuation_token: Optional[ContinuationToken],
        page_size: int,
    ) -> EventsPage:
        rpc_filter = event_filter.to_rpc()
        rpc_filter["chunk_size"] = page_size
        if continuation_token is not None:
            rpc_filter["continuation_token"] = continuation_token

        result = rpc_call(
            self.rpc_url, "starknet_getEvents", {"filter": rpc_filter}, self.timeout
        )
        try:
            return EventsPage.model_validate(result)
        except ValidationError as e:
            raise TransportFailure(
                f"Malformed starknet_getEvents page from {self.rpc_url}"
            ) from e


def get_all_events(
    source: EventSource,
    event_filter: EventFilter,
    page_size: int = PAGE_SIZE,
    max_loops: int = 100_000,
) -> list[RawEvent]:
    """
    Iterate on all event pages for `event_filter` and return every event, in fetch order.

    We keep going only while pages are non-empty *and* come back with a continuation token:
    - a page without a token is the last one, even if it has events
    - an empty page ends the scan, even if the node still hands out a token

    :param `source`: anything with a `fetch_page`, usually a `StarknetEventSource`
    :param `max_loops`: guard against an endpoint that never stops paginating
    """
    events: list[RawEvent] = []
    token: Optional[ContinuationToken] = None
    loops = 0

    while True:
        if loops >= max_loops:
            raise TooManyLoopsError("get_all_events")
        page = source.fetch_page(event_filter, token, page_size)
        events += page.events
        loops += 1

        if len(page.events) == 0 or page.continuation_token is None:
            break
        token = page.continuation_token

    return events
