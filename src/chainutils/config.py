import logging
from typing import Any, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from chainutils.domain.enums import ChainType
from chainutils.domain.schemas.chain import ChainTypeName

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    log_level: str = "INFO"
    default_chain_type: Optional[ChainTypeName] = None
    enabled_chain_types: list[ChainTypeName] = Field(default_factory=lambda: list(ChainType))

    model_config = SettingsConfigDict(env_prefix="CHAINUTILS_", env_file=".env", extra="ignore")

    def model_post_init(self, __context: Any) -> None:
        logger.debug(
            "Default chain type: %s, enabled: %s",
            self.default_chain_type.to_str() if self.default_chain_type is not None else None,
            [c.to_str() for c in self.enabled_chain_types],
        )

    def is_enabled(self, chain_type: ChainType) -> bool:
        return chain_type in self.enabled_chain_types


settings = Settings()
