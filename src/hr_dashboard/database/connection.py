from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from supabase import Client, create_client

from ..core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DataStoreConfig:
    url: str
    anon_key: str

    def validate(self) -> "DataStoreConfig":
        if not self.url:
            raise ConfigurationError(
                "Missing SUPABASE_URL. Please set the environment variable to your Supabase project URL."
            )
        if not self.anon_key:
            raise ConfigurationError(
                "Missing SUPABASE_ANON_KEY. Please set the environment variable to your Supabase anonymous key."
            )
        return self


class DataStoreConnection:
    """Singleton-like holder of the shared data platform client.

    Note: The client is created lazily on first use and reused by every repository.
    """

    _instance: Optional["DataStoreConnection"] = None

    def __init__(self, config: DataStoreConfig, client: Optional[Client] = None):
        self._config = config.validate()
        self._client = client

    @classmethod
    def get_instance(cls, config: DataStoreConfig) -> "DataStoreConnection":
        if cls._instance is None:
            cls._instance = DataStoreConnection(config)
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        cls._instance = None

    @property
    def url(self) -> str:
        return self._config.url

    def client(self) -> Client:
        if self._client is None:
            logger.info("Creating data platform client for %s", self._config.url)
            self._client = create_client(self._config.url, self._config.anon_key)
        return self._client

    def table(self, name: str):
        return self.client().table(name)
