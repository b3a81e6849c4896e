"""
Serviço de domínio para previsão de risco de alagamento por hora
Estimativa de lâmina d'água e áreas do campus afetadas.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Sequence

from ust_weather.domain.constants import Forecast
from ust_weather.domain.entities.weather_data import HourlyForecast
from ust_weather.shared.utils.clock import ensure_aware
from ust_weather.shared.utils.datetime_parser import DateTimeParser
from ust_weather.shared.utils.rounding import round_half_up


class FloodRiskLevel(Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    SEVERE = "severe"


# (nível, chuva mm >, probabilidade % >, fator de profundidade, profundidade máx cm, áreas)
FLOOD_RISK_TIERS = (
    (FloodRiskLevel.SEVERE, 20.0, 80.0, 0.5, 50.0,
     ['UST Main Building', 'Quadricentennial Pavilion', 'UST Hospital', 'España Boulevard']),
    (FloodRiskLevel.HIGH, 15.0, 60.0, 0.3, 30.0,
     ['UST Main Building', 'Quadricentennial Pavilion']),
    (FloodRiskLevel.MODERATE, 10.0, 40.0, 0.2, 15.0,
     ['UST Main Building']),
)


@dataclass(frozen=True)
class FloodRisk:
    """Risco de alagamento previsto para uma hora"""
    time: str  # hh:mm AM (Manila)
    risk_level: FloodRiskLevel
    probability: int  # %
    expected_rainfall: int  # mm
    flood_depth: int  # cm
    timestamp: datetime
    affected_areas: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            'time': self.time,
            'riskLevel': self.risk_level.value,
            'probability': self.probability,
            'expectedRainfall': self.expected_rainfall,
            'floodDepth': self.flood_depth,
            'affectedAreas': list(self.affected_areas),
            'timestamp': self.timestamp.isoformat(),
        }


class FloodRiskService:
    """Classifica cada hora futura das próximas 24h em um nível de risco."""

    @staticmethod
    def classify(precipitation: float, probability: float) -> tuple:
        """
        Returns:
            (FloodRiskLevel, profundidade em cm, áreas afetadas)
        """
        for level, rain_min, prob_min, depth_factor, depth_max, areas in FLOOD_RISK_TIERS:
            if precipitation > rain_min or probability > prob_min:
                return level, min(precipitation * depth_factor, depth_max), list(areas)
        return FloodRiskLevel.LOW, 0.0, []

    @staticmethod
    def predict(hourly: Sequence[HourlyForecast], now: datetime) -> List[FloodRisk]:
        """
        Previsões apenas para horas estritamente após `now`

        Horas com timestamp inválido são ignoradas.
        """
        now = ensure_aware(now)
        predictions = []

        for hour in hourly[:Forecast.AGGREGATE_WINDOW_HOURS]:
            hour_time = DateTimeParser.try_parse_forecast_time(hour.time)
            if hour_time is None or hour_time <= now:
                continue

            rainfall = hour.precipitation or 0.0
            probability = hour.precipitation_probability or 0.0
            level, depth, areas = FloodRiskService.classify(rainfall, probability)

            predictions.append(FloodRisk(
                time=DateTimeParser.format_clock_time(hour_time),
                risk_level=level,
                probability=round_half_up(probability),
                expected_rainfall=round_half_up(rainfall),
                flood_depth=round_half_up(depth),
                timestamp=hour_time,
                affected_areas=areas,
            ))

        return predictions
