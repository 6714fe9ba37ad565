from typing import Union

# type aliases for clarity
Felt = int
StarknetAddress = Felt
Amount = int
ContinuationToken = str
RewardAggregate = dict[StarknetAddress, Amount]

# field elements live in [0, P)
FELT_PRIME = 2**251 + 17 * 2**192 + 1


def parse_felt(value: Union[str, int]) -> Felt:
    """Felts come off JSON-RPC as 0x-prefixed hex strings"""
    felt = int(value, 16) if isinstance(value, str) else int(value)
    if felt < 0 or felt >= FELT_PRIME:
        raise ValueError(f"{value} is not a valid felt")
    return felt


def format_felt(felt: Felt) -> str:
    """0x-prefixed, zero-padded to the full 32 bytes"""
    return f"{felt:#066x}"
