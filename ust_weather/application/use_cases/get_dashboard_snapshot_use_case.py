"""
Use Case: Get Dashboard Snapshot
Combina o WeatherData em cache com os sinais derivados (alertas, agregados)
"""
from ddtrace import tracer

from ust_weather.application.dtos.responses import DashboardSnapshotResponse
from ust_weather.application.use_cases.get_cached_weather_data_use_case import GetCachedWeatherDataUseCase
from ust_weather.domain.constants import WeatherCodes
from ust_weather.domain.helpers.weather_aggregators import (
    format_last_updated,
    get_max_rain_probability_24h,
    get_next_hour_chance,
    get_rain_total_24h,
)
from ust_weather.domain.services.alert_rule_engine import AlertRuleEngine
from ust_weather.domain.services.flood_risk_service import FloodRiskService
from ust_weather.domain.services.rain_prediction_service import RainPredictionService
from ust_weather.shared.utils.clock import Clock, system_clock


class GetDashboardSnapshotUseCase:
    """Sinais derivados são recalculados a cada chamada (nunca persistidos)"""

    def __init__(
        self,
        cached_weather_use_case: GetCachedWeatherDataUseCase,
        clock: Clock = system_clock
    ):
        self.cached_weather_use_case = cached_weather_use_case
        self.clock = clock

    @tracer.wrap(resource="use_case.get_dashboard_snapshot")
    async def execute(self) -> DashboardSnapshotResponse:
        """
        Raises:
            ExhaustedFallbackException: Propagada do cache multi-camada
        """
        weather = await self.cached_weather_use_case.execute()
        now = self.clock()
        hourly = weather.hourly

        description, icon = WeatherCodes.describe(weather.current.weather_code)

        return DashboardSnapshotResponse(
            weather=weather,
            alert_level=AlertRuleEngine.calculate_alert_level(hourly),
            rain_notification=AlertRuleEngine.get_rain_notification(hourly),
            flood_warning=AlertRuleEngine.check_flood_warning(hourly),
            next_hour_chance=get_next_hour_chance(hourly, now=now),
            rain_total_24h=get_rain_total_24h(hourly),
            max_rain_probability_24h=get_max_rain_probability_24h(hourly),
            weather_description=description,
            weather_icon=icon,
            last_updated=format_last_updated(now),
            flood_risks=FloodRiskService.predict(hourly, now),
            rain_events=RainPredictionService.predict(hourly, now),
        )
