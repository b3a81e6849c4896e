"""Use Cases - Casos de uso da aplicação"""

from ust_weather.application.use_cases.get_cached_weather_data_use_case import GetCachedWeatherDataUseCase
from ust_weather.application.use_cases.get_dashboard_snapshot_use_case import GetDashboardSnapshotUseCase

__all__ = ['GetCachedWeatherDataUseCase', 'GetDashboardSnapshotUseCase']
