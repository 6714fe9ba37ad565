from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from reconciler.models.felt import Amount, Felt, StarknetAddress


class FactKind(str, Enum):
    """
    :kind EARNED: rewards recorded on the appchain
    :kind CLAIMED: rewards bridged and consumed on mainnet
    """

    EARNED = "earned"
    CLAIMED = "claimed"


class TypedFact(BaseModel):
    """A decoded reward movement for a single player"""

    model_config = ConfigDict(frozen=True)

    kind: FactKind
    account: StarknetAddress
    amount: Amount


class FactMatcher(BaseModel):
    """
    Recognises one event shape and says where its fields live.
    :param `key0`: event selector
    :param `key1`: second key, if the shape pins it (eg: the dojo model selector)
    :param `account_index`: offset of the player address in `data`
    :param `amount_index`: offset of the reward amount in `data`
    """

    model_config = ConfigDict(frozen=True)

    kind: FactKind
    key0: Felt
    key1: Optional[Felt] = None
    account_index: int
    amount_index: int

    @property
    def required_data_len(self) -> int:
        return max(self.account_index, self.amount_index) + 1

    def matches_keys(self, keys: tuple[Felt, ...]) -> bool:
        if len(keys) < 1 or keys[0] != self.key0:
            return False
        if self.key1 is None:
            return True
        return len(keys) >= 2 and keys[1] == self.key1


class FactMatchers(BaseModel):
    """The table of event shapes the decoder knows about, first match wins"""

    model_config = ConfigDict(frozen=True)

    matchers: tuple[FactMatcher, ...]

    def find(self, keys: tuple[Felt, ...]) -> Optional[FactMatcher]:
        return next((m for m in self.matchers if m.matches_keys(keys)), None)
