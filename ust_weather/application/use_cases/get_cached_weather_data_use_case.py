"""
Use Case: Get Cached Weather Data
Cache multi-camada: memória → storage persistente → rede, com fallback
"""
import asyncio
from typing import Optional

from ddtrace import tracer

from ust_weather.application.ports.output.weather_provider_port import IWeatherProvider
from ust_weather.application.services.memory_cache import MemoryCache
from ust_weather.application.services.persisted_weather_cache import PersistedWeatherCache
from ust_weather.domain.constants import Cache
from ust_weather.domain.entities.weather_data import WeatherData
from ust_weather.domain.exceptions import (
    ExhaustedFallbackException,
    FetchException,
    TransformException,
)
from ust_weather.shared.config.logger_config import get_logger
from ust_weather.shared.utils.clock import Clock, system_clock, to_epoch_ms

logger = get_logger(child=True)


class GetCachedWeatherDataUseCase:
    """
    Retorna o WeatherData atual consultando as camadas em ordem estrita

    Flow:
    1. Memória fresca (< 5 min): retorna sem nenhum outro I/O
    2. Storage persistente fresco: promove para memória (com o timestamp
       persistido) e retorna
    3. Rede (provider): grava em memória e no storage com timestamp = agora
    4. Falha de rede/transformação: snapshot persistido de qualquer idade,
       ou ExhaustedFallbackException

    As camadas são verificadas de forma independente (sem lock entre elas);
    a última escrita vence.
    """

    def __init__(
        self,
        weather_provider: IWeatherProvider,
        persisted_cache: PersistedWeatherCache,
        memory_cache: Optional[MemoryCache] = None,
        clock: Clock = system_clock,
        deduplicate_inflight: bool = True
    ):
        """
        Args:
            weather_provider: Caminho fetch + transform
            persisted_cache: Camada persistente
            memory_cache: Camada em memória (nova instância se None)
            clock: Fonte de "agora"
            deduplicate_inflight: Se True, chamadas concorrentes compartilham
                o mesmo refresh em andamento
        """
        self.weather_provider = weather_provider
        self.persisted_cache = persisted_cache
        self.memory_cache = memory_cache if memory_cache is not None else MemoryCache()
        self.clock = clock
        self.deduplicate_inflight = deduplicate_inflight
        self._inflight: Optional[asyncio.Task] = None

    @tracer.wrap(resource="use_case.get_cached_weather_data")
    async def execute(self) -> WeatherData:
        """
        Returns:
            WeatherData (possivelmente antigo, se veio do fallback)

        Raises:
            ExhaustedFallbackException: Sem dados novos e sem snapshot persistido
        """
        now_ms = to_epoch_ms(self.clock())

        cached = self.memory_cache.get_fresh(now_ms, Cache.FRESHNESS_WINDOW_MS)
        if cached is not None:
            logger.info("Weather cache hit", cache_tier="memory")
            return cached

        persisted = await self._read_fresh_persisted(now_ms)
        if persisted is not None:
            logger.info("Weather cache hit", cache_tier="persisted")
            return persisted

        logger.info("Weather cache miss, refreshing from provider", provider=self.weather_provider.provider_name)

        if not self.deduplicate_inflight:
            return await self._refresh_or_fallback()

        if self._inflight is None:
            self._inflight = asyncio.ensure_future(self._refresh_or_fallback())
            self._inflight.add_done_callback(self._clear_inflight)
        else:
            logger.info("Joining in-flight weather refresh")

        return await asyncio.shield(self._inflight)

    def _clear_inflight(self, task: asyncio.Task) -> None:
        if self._inflight is task:
            self._inflight = None

    async def _read_fresh_persisted(self, now_ms: int) -> Optional[WeatherData]:
        timestamp_result = await self.persisted_cache.read_timestamp()
        if not timestamp_result.ok or timestamp_result.value is None:
            return None

        persisted_at_ms = timestamp_result.value
        if now_ms - persisted_at_ms >= Cache.FRESHNESS_WINDOW_MS:
            return None

        value_result = await self.persisted_cache.read_value()
        if not value_result.ok or value_result.value is None:
            return None

        # Promove com o timestamp persistido (não "agora")
        self.memory_cache.set(value_result.value, persisted_at_ms)
        return value_result.value

    async def _refresh_or_fallback(self) -> WeatherData:
        try:
            data = await self.weather_provider.get_weather_data()
        except (FetchException, TransformException) as e:
            logger.warning(
                "Weather refresh failed, trying persisted fallback",
                error_type=type(e).__name__,
                error=str(e)
            )
            return await self._fallback(e)

        written_at_ms = to_epoch_ms(self.clock())
        self.memory_cache.set(data, written_at_ms)
        await self.persisted_cache.write(data, written_at_ms)

        logger.info("Weather data refreshed", hourly_entries=len(data.hourly))
        return data

    async def _fallback(self, error: Exception) -> WeatherData:
        result = await self.persisted_cache.read_value()
        if result.ok and result.value is not None:
            logger.warning("Serving stale persisted weather snapshot")
            return result.value

        logger.error("No weather data available from any tier", error_type=type(error).__name__)
        raise ExhaustedFallbackException(
            details={"cause": type(error).__name__, "reason": str(error)}
        ) from error
