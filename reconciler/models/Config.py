from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, field_validator, model_validator

from reconciler.errors import BadConfigException
from reconciler.models.Event import EventFilter
from reconciler.models.felt import StarknetAddress, parse_felt


class SourceConfig(BaseModel):
    """
    Where to read one ledger from
    :param `rpc_url`: starknet JSON-RPC endpoint
    :param `address`: contract emitting the events
    :param `from_block`: first block to scan (inclusive), None for genesis
    :param `to_block`: last block to scan (inclusive), None for latest
    """

    rpc_url: str
    address: StarknetAddress
    from_block: Optional[int] = None
    to_block: Optional[int] = None

    @field_validator("address", mode="before")
    @classmethod
    def validate_address(cls, address: Any):
        try:
            return parse_felt(address)
        except (TypeError, ValueError):
            raise BadConfigException(f"Invalid contract address {address}")

    @field_validator("from_block", "to_block")
    @classmethod
    def validate_block(cls, block: Optional[int]):
        if block is not None and block < 0:
            raise BadConfigException("Block numbers cannot be negative")
        return block

    @model_validator(mode="after")
    def validate_block_range(self):
        if (
            self.from_block is not None
            and self.to_block is not None
            and self.from_block > self.to_block
        ):
            raise BadConfigException("from_block is after to_block")
        return self

    def event_filter(self) -> EventFilter:
        return EventFilter(
            address=self.address, from_block=self.from_block, to_block=self.to_block
        )


class Config(BaseModel):
    """
    Everything a reconciliation run needs
    :param `appchain`: source of the earned rewards
    :param `mainnet`: source of the claimed rewards
    :param `page_size`: events requested per `starknet_getEvents` call
    """

    appchain: SourceConfig
    mainnet: SourceConfig
    output_dir: str
    listing_filename: str = "nums_rewards_claims.csv"
    airdrop_filename: str = "nums_airdrop_sequence1.csv"
    page_size: int = 500

    @field_validator("page_size")
    @classmethod
    def validate_page_size(cls, page_size: int):
        if page_size <= 0:
            raise BadConfigException("Page size must be positive")
        return page_size

    @field_validator("listing_filename", "airdrop_filename")
    @classmethod
    def validate_filename(cls, filename: str):
        if not filename.strip():
            raise BadConfigException("Missing output filename")
        return filename

    @model_validator(mode="after")
    def validate_distinct_outputs(self):
        if self.listing_filename == self.airdrop_filename:
            raise BadConfigException("Listing and airdrop would overwrite each other")
        return self
