from eth_utils import keccak

from reconciler.models import FactKind, FactMatcher, FactMatchers, Felt

# starknet keccak keeps the low 250 bits of keccak-256
MASK_250 = 2**250 - 1

# dojo selector of the nums `Totals` model, the second key of its StoreSetRecord events
NUMS_TOTALS_SELECTOR: Felt = (
    0x293104E49F49EE445423AE4B6ED9CBCC84CE3E5A27466264FEE006DEA23BFA6
)


def selector(name: str) -> Felt:
    """Starknet selector of an entrypoint or event name"""
    return int.from_bytes(keccak(text=name), "big") & MASK_250


STORE_SET_RECORD = selector("StoreSetRecord")
MESSAGE_CONSUMED = selector("MessageConsumed")


def default_matchers(totals_selector: Felt = NUMS_TOTALS_SELECTOR) -> FactMatchers:
    """
    Event shapes for the nums reward flow.

    StoreSetRecord(Totals) on the appchain:
        data[0] = number of model keys (0x1), data[1] = player address,
        data[2] = number of model values, data[3] = rewards earned

    MessageConsumed on mainnet (piltover):
        data[0] = payload length, data[1] = player address,
        data[2] = game id, data[3] = rewards claimed
    """
    return FactMatchers(
        matchers=(
            FactMatcher(
                kind=FactKind.EARNED,
                key0=STORE_SET_RECORD,
                key1=totals_selector,
                account_index=1,
                amount_index=3,
            ),
            FactMatcher(
                kind=FactKind.CLAIMED,
                key0=MESSAGE_CONSUMED,
                account_index=1,
                amount_index=3,
            ),
        )
    )
