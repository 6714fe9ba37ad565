from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from reconciler.models.felt import Amount, StarknetAddress


class ReconciliationRecord(BaseModel):
    """
    Earned vs. claimed for one player
    :param `claimed`: zero if the player never claimed on mainnet
    :param `outstanding`: earned - claimed when positive, otherwise zero
    """

    model_config = ConfigDict(frozen=True)

    account: StarknetAddress
    earned: Amount
    claimed: Amount = 0
    outstanding: Amount = 0

    @property
    def requires_airdrop(self) -> bool:
        return self.outstanding > 0


class ReconciliationReport(BaseModel):
    """
    Full listing sorted by account, along with the counts for the run summary.
    :param `n_earners`: distinct accounts that earned on the appchain
    :param `n_claimers`: distinct accounts that claimed on mainnet
    """

    records: list[ReconciliationRecord]
    n_earners: int
    n_claimers: int

    @property
    def airdrop(self) -> list[ReconciliationRecord]:
        return [r for r in self.records if r.requires_airdrop]

    @property
    def n_airdrop(self) -> int:
        return len(self.airdrop)
