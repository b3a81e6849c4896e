"""
Auto Refresh Service - refresh periódico do WeatherData (a cada 10 minutos)

Timer repetitivo simples: não cancela fetches em andamento quando um refresh
manual é disparado; ambos podem rodar concorrentemente.
"""
import asyncio
from datetime import datetime
from typing import Awaitable, Callable, Optional

from ust_weather.application.use_cases.get_cached_weather_data_use_case import GetCachedWeatherDataUseCase
from ust_weather.domain.constants import Cache
from ust_weather.domain.entities.weather_data import WeatherData
from ust_weather.domain.exceptions import ExhaustedFallbackException
from ust_weather.shared.config.logger_config import get_logger
from ust_weather.shared.utils.clock import Clock, system_clock

logger = get_logger(child=True)


class AutoRefreshService:
    """
    Executa o use case de cache imediatamente e depois a cada `interval_seconds`

    Uso:
        service = AutoRefreshService(use_case, on_update=render)
        service.start()
        ...
        await service.stop()
    """

    def __init__(
        self,
        cached_weather_use_case: GetCachedWeatherDataUseCase,
        interval_seconds: float = Cache.AUTO_REFRESH_INTERVAL_SECONDS,
        on_update: Optional[Callable[[WeatherData], None]] = None,
        clock: Clock = system_clock,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep
    ):
        self.cached_weather_use_case = cached_weather_use_case
        self.interval_seconds = interval_seconds
        self.on_update = on_update
        self.clock = clock
        self._sleep = sleep
        self._task: Optional[asyncio.Task] = None

        self.last_data: Optional[WeatherData] = None
        self.last_updated: Optional[datetime] = None
        self.last_error: Optional[Exception] = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Inicia o loop (idempotente)"""
        if self.is_running:
            return
        self._task = asyncio.ensure_future(self._run())
        logger.info("Auto refresh started", interval_seconds=self.interval_seconds)

    async def stop(self) -> None:
        """Cancela o loop e aguarda o término"""
        if self._task is None:
            return
        task, self._task = self._task, None
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.info("Auto refresh stopped")

    async def refresh_now(self) -> WeatherData:
        """
        Refresh manual (também usado pelo loop)

        Raises:
            ExhaustedFallbackException: Se nenhuma camada tiver dados
        """
        try:
            data = await self.cached_weather_use_case.execute()
        except ExhaustedFallbackException as e:
            self.last_error = e
            raise

        self.last_data = data
        self.last_updated = self.clock()
        self.last_error = None
        if self.on_update is not None:
            self.on_update(data)
        return data

    async def _run(self) -> None:
        while True:
            try:
                await self.refresh_now()
            except ExhaustedFallbackException as e:
                logger.error("Auto refresh failed", error=e.message)
            except Exception:
                # Loop sobrevive a falhas inesperadas (ex: on_update); próximo tick tenta de novo
                logger.exception("Auto refresh crashed")
            await self._sleep(self.interval_seconds)
