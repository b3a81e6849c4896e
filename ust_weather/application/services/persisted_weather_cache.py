"""
Persisted Weather Cache - camada persistente do cache multi-camada

Serializa WeatherData em uma chave de valor e o instante de escrita (epoch ms)
em uma chave de timestamp separada. Toda leitura/escrita retorna StorageResult:
falhas de storage e valores corrompidos são logados e NUNCA propagados.
"""
import json
from dataclasses import dataclass
from typing import Any, Optional

from ddtrace import tracer

from ust_weather.application.ports.output.key_value_storage_port import IKeyValueStorage
from ust_weather.domain.constants import Cache
from ust_weather.domain.entities.weather_data import WeatherData
from ust_weather.domain.exceptions import CacheReadException
from ust_weather.shared.config.logger_config import get_logger

logger = get_logger(child=True)


@dataclass(frozen=True)
class StorageResult:
    """Resultado de uma operação de storage (sucesso/falha)"""
    ok: bool
    value: Any = None
    error: Optional[Exception] = None

    @classmethod
    def success(cls, value: Any = None) -> 'StorageResult':
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: Exception) -> 'StorageResult':
        return cls(ok=False, error=error)


class PersistedWeatherCache:
    """Leitura/escrita de WeatherData no storage persistente"""

    def __init__(
        self,
        storage: IKeyValueStorage,
        value_key: str = Cache.VALUE_KEY,
        timestamp_key: str = Cache.TIMESTAMP_KEY
    ):
        self.storage = storage
        self.value_key = value_key
        self.timestamp_key = timestamp_key

    @tracer.wrap(resource="persisted_cache.read_timestamp")
    async def read_timestamp(self) -> StorageResult:
        """
        Lê o timestamp da última escrita

        Returns:
            StorageResult com epoch ms (int) ou None se ausente
        """
        try:
            raw = await self.storage.get_item(self.timestamp_key)
            if raw is None:
                return StorageResult.success(None)
            try:
                return StorageResult.success(int(raw))
            except (TypeError, ValueError) as e:
                raise CacheReadException(
                    "Invalid persisted timestamp",
                    details={"key": self.timestamp_key, "raw": str(raw)[:50]}
                ) from e
        except Exception as e:
            logger.warning("Persisted cache timestamp read failed", key=self.timestamp_key, error=str(e))
            return StorageResult.failure(e)

    @tracer.wrap(resource="persisted_cache.read_value")
    async def read_value(self) -> StorageResult:
        """
        Lê e desserializa o snapshot persistido (sem checar idade)

        Returns:
            StorageResult com WeatherData ou None se ausente
        """
        try:
            raw = await self.storage.get_item(self.value_key)
            if not raw:
                return StorageResult.success(None)
            return StorageResult.success(self._deserialize(raw))
        except Exception as e:
            logger.warning("Persisted cache value read failed", key=self.value_key, error=str(e))
            return StorageResult.failure(e)

    @tracer.wrap(resource="persisted_cache.write")
    async def write(self, data: WeatherData, timestamp_ms: int) -> StorageResult:
        """
        Grava snapshot + timestamp (substituição completa)

        Uma falha aqui nunca deve abortar um fetch bem-sucedido.
        """
        try:
            payload = json.dumps(data.to_dict(), ensure_ascii=False, separators=(',', ':'))
            await self.storage.set_item(self.value_key, payload)
            await self.storage.set_item(self.timestamp_key, str(timestamp_ms))
            return StorageResult.success()
        except Exception as e:
            logger.warning("Persisted cache write failed", key=self.value_key, error=str(e))
            return StorageResult.failure(e)

    def _deserialize(self, raw: str) -> WeatherData:
        try:
            return WeatherData.from_dict(json.loads(raw))
        except (ValueError, KeyError, TypeError) as e:
            raise CacheReadException(
                "Corrupted persisted weather data",
                details={"key": self.value_key}
            ) from e
