import os
from typing import Optional

from dotenv import load_dotenv
from reconciler.errors import MissingEnvironmentVariableException

load_dotenv()


def env_var(accessor: str, default: Optional[str] = None) -> str:
    """
    Attempt to fetch an environment variable, falling back to `default`,
    and throw an error if neither is set
    """
    var = os.environ.get(accessor, default)
    if not var:
        raise MissingEnvironmentVariableException(accessor)
    return var


class ADDRESSES:
    # dojo world deployed on the appchain
    WORLD = env_var(
        "WORLD_ADDRESS",
        "0x7686a16189676ac3978c3b865ae7e3d625a1cd7438800849c7fd866e4b9afd1",
    )
    # piltover core contract on starknet mainnet, consumes the bridged messages
    PILTOVER = env_var(
        "PILTOVER_ADDRESS",
        "0x0005edcd6d607a9f83184fda3462cb7b0bd6dbf41942ecb1fca10d76ebbc06cf",
    )


class RPC:
    APPCHAIN = env_var("APPCHAIN_RPC_URL", "http://localhost:5050")
    MAINNET = env_var(
        "MAINNET_RPC_URL", "https://api.cartridge.gg/x/starknet/mainnet"
    )


# piltover was deployed after this block, nothing to scan before it
MAINNET_FROM_BLOCK = int(env_var("MAINNET_FROM_BLOCK", "1180290"))
OUTPUT_DIR = env_var("OUTPUT_DIR", "/tmp")
