from typing import Iterable

from reconciler.models import FactKind, FactMatchers, RawEvent, RewardAggregate, TypedFact
from reconciler.rewards.decoder import decode_all


def aggregate(facts: Iterable[TypedFact]) -> RewardAggregate:
    """
    Sum amounts per account.
    Plain addition over a dict, so the result does not depend on the order of `facts`.
    """
    totals: RewardAggregate = {}
    for fact in facts:
        totals[fact.account] = totals.get(fact.account, 0) + fact.amount
    return totals


def build_aggregate(
    events: Iterable[RawEvent], matchers: FactMatchers, kind: FactKind
) -> RewardAggregate:
    """Decode one source's events and total the facts of `kind`"""
    return aggregate(decode_all(events, matchers, kind))
