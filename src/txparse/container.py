from dependency_injector import containers, providers

from txparse.client import TxParseClient
from txparse.config import Settings
from txparse.infra.http.rate_limited_client import RateLimitedClient
from txparse.infra.sui.rpc_client import SuiRPCClient


class Container(containers.DeclarativeContainer):
    settings = providers.Singleton(Settings)

    http_client = providers.Singleton(
        RateLimitedClient,
        rate_per_second=settings.provided.rpc_rate_per_second,
        timeout=settings.provided.rpc_timeout,
    )

    rpc_client = providers.Singleton(
        SuiRPCClient,
        rpc_url=settings.provided.sui_rpc_url,
        http_client=http_client,
    )

    tx_parse_client = providers.Factory(
        TxParseClient,
        rpc=rpc_client,
    )
