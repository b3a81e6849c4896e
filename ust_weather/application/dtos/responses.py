"""Response DTOs - Contratos de saída dos use cases"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ust_weather.domain.alerts.primitives import AlertLevel
from ust_weather.domain.entities.weather_data import WeatherData
from ust_weather.domain.helpers.weather_aggregators import NextHourChance
from ust_weather.domain.services.flood_risk_service import FloodRisk
from ust_weather.domain.services.rain_prediction_service import RainEvent


@dataclass
class DashboardSnapshotResponse:
    """Dados + sinais derivados consumidos pelo dashboard em uma única resposta"""
    weather: WeatherData
    alert_level: AlertLevel
    rain_notification: Optional[str]
    flood_warning: bool
    next_hour_chance: NextHourChance
    rain_total_24h: float
    max_rain_probability_24h: float
    weather_description: str
    weather_icon: str
    last_updated: str  # hh:mm AM (Manila)
    flood_risks: List[FloodRisk] = field(default_factory=list)
    rain_events: List[RainEvent] = field(default_factory=list)

    def to_api_response(self) -> Dict[str, Any]:
        """
        Converte para formato de resposta da API

        Returns:
            Dict com dados formatados para JSON
        """
        return {
            'weather': self.weather.to_dict(),
            'alertLevel': self.alert_level.to_dict(),
            'rainNotification': self.rain_notification,
            'floodWarning': self.flood_warning,
            'nextHourChance': self.next_hour_chance.to_dict(),
            'rainTotal24h': round(self.rain_total_24h, 1),
            'maxRainProbability24h': self.max_rain_probability_24h,
            'weatherDescription': self.weather_description,
            'weatherIcon': self.weather_icon,
            'lastUpdated': self.last_updated,
            'floodRisks': [risk.to_dict() for risk in self.flood_risks],
            'rainEvents': [event.to_dict() for event in self.rain_events],
        }
