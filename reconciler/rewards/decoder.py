from typing import Iterable, Optional

from reconciler.models import FactKind, FactMatchers, RawEvent, TypedFact


def decode(event: RawEvent, matchers: FactMatchers) -> Optional[TypedFact]:
    """
    Turn a raw event into a reward fact, or None if it is not one of ours.

    Broad filters pick up every event a contract emits, so anything we don't
    recognise, or that is too short to hold the fields we expect, is skipped
    rather than treated as an error.
    """
    matcher = matchers.find(event.keys)
    if matcher is None:
        return None

    if len(event.data) < matcher.required_data_len:
        return None

    return TypedFact(
        kind=matcher.kind,
        account=event.data[matcher.account_index],
        amount=event.data[matcher.amount_index],
    )


def decode_all(
    events: Iterable[RawEvent],
    matchers: FactMatchers,
    kind: Optional[FactKind] = None,
) -> list[TypedFact]:
    """Decode a batch of events, optionally keeping a single kind of fact"""
    facts = [f for f in (decode(e, matchers) for e in events) if f is not None]
    if kind is None:
        return facts
    return [f for f in facts if f.kind == kind]
