from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    sui_rpc_url: str = "https://fullnode.mainnet.sui.io:443"
    rpc_rate_per_second: float = 5.0
    rpc_timeout: float = 30.0  # seconds per HTTP request
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "TXPARSE_"
