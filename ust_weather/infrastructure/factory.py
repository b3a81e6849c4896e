"""
Weather Service Factory - monta provider, storage e use cases
Mantém lazy-loading e singleton para reuso em execução quente da Lambda
"""
from typing import Optional

from ust_weather.application.services.persisted_weather_cache import PersistedWeatherCache
from ust_weather.application.use_cases.get_cached_weather_data_use_case import GetCachedWeatherDataUseCase
from ust_weather.application.use_cases.get_dashboard_snapshot_use_case import GetDashboardSnapshotUseCase
from ust_weather.infrastructure.adapters.output.providers.openmeteo import get_openmeteo_provider
from ust_weather.infrastructure.adapters.output.storage.storage_factory import get_key_value_storage

_cached_weather_use_case: Optional[GetCachedWeatherDataUseCase] = None


def get_cached_weather_data_use_case() -> GetCachedWeatherDataUseCase:
    """
    Singleton do cache multi-camada (a camada de memória vive nele)
    """
    global _cached_weather_use_case

    if _cached_weather_use_case is None:
        _cached_weather_use_case = GetCachedWeatherDataUseCase(
            weather_provider=get_openmeteo_provider(),
            persisted_cache=PersistedWeatherCache(get_key_value_storage())
        )

    return _cached_weather_use_case


def get_dashboard_snapshot_use_case() -> GetDashboardSnapshotUseCase:
    return GetDashboardSnapshotUseCase(get_cached_weather_data_use_case())


def reset_use_cases() -> None:
    """Reset dos singletons (testes)"""
    global _cached_weather_use_case
    _cached_weather_use_case = None
