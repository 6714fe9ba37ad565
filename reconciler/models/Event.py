from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from reconciler.models.felt import (
    ContinuationToken,
    Felt,
    StarknetAddress,
    format_felt,
    parse_felt,
)


class RawEvent(BaseModel):
    """
    An emitted event as returned by `starknet_getEvents`.
    :param `keys`: the selector path, `keys[0]` is the event selector
    :param `data`: the serialized payload
    """

    model_config = ConfigDict(frozen=True)

    keys: tuple[Felt, ...]
    data: tuple[Felt, ...]
    from_address: Optional[StarknetAddress] = None
    block_number: Optional[int] = None
    block_hash: Optional[Felt] = None
    transaction_hash: Optional[Felt] = None

    @field_validator("keys", "data", mode="before")
    @classmethod
    def parse_felts(cls, values: Any):
        return tuple(parse_felt(v) for v in values)

    @field_validator("from_address", "block_hash", "transaction_hash", mode="before")
    @classmethod
    def parse_optional_felt(cls, value: Any):
        return None if value is None else parse_felt(value)


class EventsPage(BaseModel):
    """One chunk of events plus the cursor to the next chunk, if any"""

    events: list[RawEvent]
    continuation_token: Optional[ContinuationToken] = None


class EventFilter(BaseModel):
    """
    Query descriptor for one source, built once before paginating.
    Block bounds are inclusive. `keys` follows starknet semantics: one list of
    accepted values per key position, an empty list matches anything.
    """

    model_config = ConfigDict(frozen=True)

    address: StarknetAddress
    from_block: Optional[int] = None
    to_block: Optional[int] = None
    keys: Optional[tuple[tuple[Felt, ...], ...]] = None

    @field_validator("address", mode="before")
    @classmethod
    def parse_address(cls, value: Any):
        return parse_felt(value)

    @field_validator("keys", mode="before")
    @classmethod
    def parse_keys(cls, values: Any):
        if values is None:
            return None
        return tuple(tuple(parse_felt(v) for v in position) for position in values)

    def to_rpc(self) -> dict[str, Any]:
        """Render the filter in the shape `starknet_getEvents` expects"""
        rpc: dict[str, Any] = {"address": format_felt(self.address)}
        if self.from_block is not None:
            rpc["from_block"] = {"block_number": self.from_block}
        if self.to_block is not None:
            rpc["to_block"] = {"block_number": self.to_block}
        if self.keys is not None:
            rpc["keys"] = [[hex(k) for k in position] for position in self.keys]
        return rpc
