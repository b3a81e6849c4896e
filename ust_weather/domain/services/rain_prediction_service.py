"""
Serviço de domínio para eventos de chuva previstos nas próximas 24h
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import List, Sequence

from ust_weather.domain.constants import Forecast
from ust_weather.domain.entities.weather_data import HourlyForecast
from ust_weather.shared.utils.clock import ensure_aware
from ust_weather.shared.utils.datetime_parser import DateTimeParser
from ust_weather.shared.utils.rounding import round_half_up

# Probabilidade mínima (%) para uma hora virar evento de chuva
RAIN_EVENT_MIN_PROBABILITY = 20.0


class RainIntensity(Enum):
    LIGHT = "light"
    MODERATE = "moderate"
    HEAVY = "heavy"
    EXTREME = "extreme"


# (intensidade, chuva mm >, duração estimada em minutos, descrição)
RAIN_INTENSITY_TIERS = (
    (RainIntensity.EXTREME, 30.0, 120, "Torrential downpour expected - avoid outdoor activities"),
    (RainIntensity.HEAVY, 20.0, 90, "Heavy rainfall - use umbrella and avoid flooded areas"),
    (RainIntensity.MODERATE, 10.0, 75, "Moderate rain - carry umbrella and waterproof gear"),
)
_LIGHT_TIER = (RainIntensity.LIGHT, 60, "Light rain - light jacket or umbrella recommended")


@dataclass(frozen=True)
class RainEvent:
    time: str  # hh:mm AM (Manila)
    intensity: RainIntensity
    probability: int
    duration_minutes: int
    expected_rainfall: int
    timestamp: datetime
    description: str

    def to_dict(self) -> dict:
        return {
            'time': self.time,
            'intensity': self.intensity.value,
            'probability': self.probability,
            'duration': self.duration_minutes,
            'expectedRainfall': self.expected_rainfall,
            'timestamp': self.timestamp.isoformat(),
            'description': self.description,
        }


class RainPredictionService:
    """Gera eventos de chuva para horas futuras com probabilidade > 20%."""

    @staticmethod
    def classify(precipitation: float) -> tuple:
        """Returns: (RainIntensity, duração em minutos, descrição)"""
        for intensity, rain_min, duration, description in RAIN_INTENSITY_TIERS:
            if precipitation > rain_min:
                return intensity, duration, description
        return _LIGHT_TIER

    @staticmethod
    def predict(hourly: Sequence[HourlyForecast], now: datetime) -> List[RainEvent]:
        now = ensure_aware(now)
        events = []

        for hour in hourly[:Forecast.AGGREGATE_WINDOW_HOURS]:
            hour_time = DateTimeParser.try_parse_forecast_time(hour.time)
            if hour_time is None or hour_time <= now:
                continue

            probability = hour.precipitation_probability or 0.0
            if probability <= RAIN_EVENT_MIN_PROBABILITY:
                continue

            rainfall = hour.precipitation or 0.0
            intensity, duration, description = RainPredictionService.classify(rainfall)

            events.append(RainEvent(
                time=DateTimeParser.format_clock_time(hour_time),
                intensity=intensity,
                probability=round_half_up(probability),
                duration_minutes=duration,
                expected_rainfall=round_half_up(rainfall),
                timestamp=hour_time,
                description=description,
            ))

        return events
