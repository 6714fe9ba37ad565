import json
from typing import Optional

from reconciler.env import ADDRESSES, MAINNET_FROM_BLOCK, OUTPUT_DIR, RPC
from reconciler.models import Config, SourceConfig


def default_conf() -> Config:
    """Builds the run config from the environment (see `reconciler.env`)"""
    return Config(
        appchain=SourceConfig(rpc_url=RPC.APPCHAIN, address=ADDRESSES.WORLD),
        mainnet=SourceConfig(
            rpc_url=RPC.MAINNET,
            address=ADDRESSES.PILTOVER,
            from_block=MAINNET_FROM_BLOCK,
        ),
        output_dir=OUTPUT_DIR,
    )


def load_conf(config_path: str) -> Config:
    """Loads an existing config from a json file"""
    with open(config_path) as f:
        return Config.model_validate(json.load(f))


def get_conf(config_path: Optional[str] = None) -> Config:
    return default_conf() if config_path is None else load_conf(config_path)
