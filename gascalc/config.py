from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Block explorer (Etherscan-compatible)
    etherscan_api_key: str = Field(
        min_length=1,
        validation_alias=AliasChoices("etherscan_api_key", "apikey"),
    )
    etherscan_base_url: str = "https://api.etherscan.io/api"
    # Only sent when set (v2 multichain endpoint)
    etherscan_chain_id: int | None = None
    request_timeout_seconds: float = Field(default=10.0, gt=0)

    # txlist pagination (0 = single request, no page/offset params)
    txlist_page_size: int = Field(default=0, ge=0)
    txlist_max_pages: int = Field(default=10, ge=1)

    # Reject unknown time_period values instead of using a zero-length window
    strict_time_period: bool = False

    # Server
    log_level: str = "INFO"
    host: str
    port: int

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
