from typing import Optional

import fire

from reconciler.config import get_conf
from reconciler.models import Config, FactKind, FactMatchers, ReconciliationReport, Writer
from reconciler.queries import get_appchain_events, get_mainnet_events
from reconciler.rewards import build_aggregate, reconcile
from reconciler.starknet_selectors import default_matchers


def run(conf: Config, matchers: FactMatchers) -> ReconciliationReport:
    """
    Fetch both ledgers, reconcile them and write the listing and airdrop files.
    Any fetch or write failure propagates: we never write a report from partial data.
    """
    print("⛓ Gathering appchain events...")
    appchain_events = get_appchain_events(conf)
    earned = build_aggregate(appchain_events, matchers, FactKind.EARNED)

    print("⛓ Gathering mainnet events...")
    mainnet_events = get_mainnet_events(conf)
    claimed = build_aggregate(mainnet_events, matchers, FactKind.CLAIMED)

    print(f"Appchain player rewards: {len(earned)}")
    print(f"Mainnet player claims: {len(claimed)}")

    report = reconcile(earned, claimed)
    writer = Writer(conf)
    writer.to_csv(report)

    print(f"📄 Wrote {writer.listing_path} and {writer.airdrop_path}")
    print(f"🚀 Number of airdropped players: {report.n_airdrop}")
    return report


def main(config_path: Optional[str] = None) -> None:
    """
    Reconcile nums rewards earned on the appchain against claims on mainnet.
    :param `config_path`: optional json config, defaults to the environment
    """
    run(get_conf(config_path), default_matchers())


if __name__ == "__main__":
    fire.Fire(main)
