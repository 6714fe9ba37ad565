from reconciler.models import (
    Amount,
    ReconciliationRecord,
    ReconciliationReport,
    RewardAggregate,
    StarknetAddress,
)


def reconcile_account(
    account: StarknetAddress, earned: Amount, claimed: Amount
) -> ReconciliationRecord:
    # only subtract when it can't go negative
    outstanding = earned - claimed if earned > claimed else 0
    return ReconciliationRecord(
        account=account, earned=earned, claimed=claimed, outstanding=outstanding
    )


def reconcile(earned: RewardAggregate, claimed: RewardAggregate) -> ReconciliationReport:
    """
    Compare what each player earned on the appchain with what they claimed on mainnet.

    Enumeration is driven by `earned` only: accounts that show up in `claimed`
    without an earned total are left out of the report.
    Records are sorted by account so the output is reproducible between runs.

    :param `earned`: totals from the appchain StoreSetRecord events
    :param `claimed`: totals from the mainnet MessageConsumed events
    """
    records = [
        reconcile_account(account, earned[account], claimed.get(account, 0))
        for account in sorted(earned)
    ]
    return ReconciliationReport(
        records=records, n_earners=len(earned), n_claimers=len(claimed)
    )
