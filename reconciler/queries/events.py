from reconciler.models import Config, RawEvent
from reconciler.queries.common import StarknetEventSource, get_all_events


def get_appchain_events(conf: Config) -> list[RawEvent]:
    """Every event emitted by the dojo world on the appchain"""
    source = StarknetEventSource(conf.appchain.rpc_url)
    return get_all_events(source, conf.appchain.event_filter(), conf.page_size)


def get_mainnet_events(conf: Config) -> list[RawEvent]:
    """Every event emitted by piltover on mainnet since `conf.mainnet.from_block`"""
    source = StarknetEventSource(conf.mainnet.rpc_url)
    return get_all_events(source, conf.mainnet.event_filter(), conf.page_size)
