from dataclasses import dataclass, field
from typing import Any, Optional

import pytest
import requests

from reconciler.models import (
    Config,
    EventFilter,
    EventsPage,
    FactMatchers,
    RawEvent,
    SourceConfig,
)
from reconciler.starknet_selectors import (
    MESSAGE_CONSUMED,
    NUMS_TOTALS_SELECTOR,
    STORE_SET_RECORD,
    default_matchers,
)

APPCHAIN_URL = "http://appchain.test"
MAINNET_URL = "http://mainnet.test"
WORLD = 0x7686A16189676AC3978C3B865AE7E3D625A1CD7438800849C7FD866E4B9AFD1
PILTOVER = 0x5EDCD6D607A9F83184FDA3462CB7B0BD6DBF41942ECB1FCA10D76EBBC06CF


@pytest.fixture()
def ADDRESSES() -> list[int]:
    # ascending on purpose
    return [
        0x1,
        0x4F1A2B3C,
        0x7AC54A0406FA2B465E0D57C66597BE83A4B149FC0000000000000000000001,
        0x2A5E1B7C0D39E4F8A61B2C3D4E5F60718293A4B5C6D7E8F90A1B2C3D4E5F607,
    ]


@pytest.fixture
def matchers() -> FactMatchers:
    return default_matchers()


def earned_event_json(account: int, amount: int, model: int = NUMS_TOTALS_SELECTOR) -> dict:
    """StoreSetRecord of the Totals model, as returned over JSON-RPC"""
    return {
        "from_address": hex(WORLD),
        "keys": [hex(STORE_SET_RECORD), hex(model), hex(account)],
        "data": ["0x1", hex(account), "0x1", hex(amount)],
        "block_number": 10,
        "block_hash": "0x1234",
        "transaction_hash": "0xabcd",
    }


def claimed_event_json(account: int, amount: int, game_id: int = 7) -> dict:
    """MessageConsumed on piltover, as returned over JSON-RPC"""
    return {
        "from_address": hex(PILTOVER),
        "keys": [hex(MESSAGE_CONSUMED)],
        "data": ["0x3", hex(account), hex(game_id), hex(amount)],
        "block_number": 1180291,
        "block_hash": "0x5678",
        "transaction_hash": "0xef01",
    }


@pytest.fixture
def earned_event():
    def _earned(account: int, amount: int, **kwargs) -> RawEvent:
        return RawEvent.model_validate(earned_event_json(account, amount, **kwargs))

    return _earned


@pytest.fixture
def claimed_event():
    def _claimed(account: int, amount: int, **kwargs) -> RawEvent:
        return RawEvent.model_validate(claimed_event_json(account, amount, **kwargs))

    return _claimed


@pytest.fixture
def filler_events() -> list[RawEvent]:
    """Events for other keys that share the same contract"""
    return [
        RawEvent(keys=(0xDEAD,), data=(1, 2, 3, 4)),
        RawEvent(keys=(STORE_SET_RECORD, 0xBEEF, 0x1), data=(1, 0x1, 1, 99)),
        RawEvent(keys=(MESSAGE_CONSUMED,), data=(1,)),
    ]


@dataclass
class FakeEventSource:
    """
    Serves pre-built pages in order and records every call.
    `pages` is a list of (events, continuation_token) pairs.
    """

    pages: list[tuple[list[RawEvent], Optional[str]]]
    calls: list[tuple[EventFilter, Optional[str], int]] = field(default_factory=list)

    def fetch_page(
        self, event_filter: EventFilter, continuation_token: Optional[str], page_size: int
    ) -> EventsPage:
        self.calls.append((event_filter, continuation_token, page_size))
        events, token = self.pages[len(self.calls) - 1]
        return EventsPage(events=events, continuation_token=token)


@pytest.fixture
def fake_source():
    return FakeEventSource


@pytest.fixture
def event_filter() -> EventFilter:
    return EventFilter(address=WORLD)


@pytest.fixture
def config(tmp_path) -> Config:
    return Config(
        appchain=SourceConfig(rpc_url=APPCHAIN_URL, address=hex(WORLD)),
        mainnet=SourceConfig(
            rpc_url=MAINNET_URL, address=hex(PILTOVER), from_block=1180290
        ),
        output_dir=str(tmp_path / "reports"),
    )


@dataclass
class MockResponse:
    res: Any
    status: int = 200

    def json(self):
        return self.res

    def raise_for_status(self):
        if self.status >= 400:
            raise requests.HTTPError(f"{self.status} Error")


@pytest.fixture
def mock_response():
    return MockResponse


@pytest.fixture
def earned_json():
    return earned_event_json


@pytest.fixture
def claimed_json():
    return claimed_event_json
