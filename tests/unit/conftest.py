"""
Configurações e fixtures compartilhadas para testes unitários
"""
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

import pytest

from ust_weather.domain.entities.weather_data import (
    CurrentWeather,
    HourlyForecast,
    Location,
    WeatherData,
)

# 2025-06-01 13:30 em Manila (UTC+8)
FIXED_NOW = datetime(2025, 6, 1, 5, 30, tzinfo=timezone.utc)


class InMemoryStorage:
    """IKeyValueStorage fake com contadores de chamadas"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})
        self.get_calls = 0
        self.set_calls = 0

    async def get_item(self, key: str) -> Optional[str]:
        self.get_calls += 1
        return self.data.get(key)

    async def set_item(self, key: str, value: str) -> None:
        self.set_calls += 1
        self.data[key] = value


class FakeClock:
    """Clock controlável (avança manualmente)"""

    def __init__(self, now: datetime = FIXED_NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def memory_storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def make_hourly_forecast():
    """
    Factory fixture para criar HourlyForecast com valores padrão

    Usage:
        def test_something(make_hourly_forecast):
            forecast = make_hourly_forecast(precipitation=12.0)
    """
    def _make(
        time: str = '2025-06-01T14:00',
        temperature: float = 31.0,
        weather_code: int = 0,
        precipitation: float = 0.0,
        precipitation_probability: float = 0.0,
        humidity: float = 70.0,
        wind_speed: float = 10.0
    ) -> HourlyForecast:
        return HourlyForecast(
            time=time,
            temperature=temperature,
            weather_code=weather_code,
            precipitation=precipitation,
            precipitation_probability=precipitation_probability,
            humidity=humidity,
            wind_speed=wind_speed
        )

    return _make


@pytest.fixture
def make_hourly_series(make_hourly_forecast):
    """
    Cria série horária a partir de pares (precipitação, probabilidade)
    começando em 2025-06-01T14:00 (Manila)
    """
    def _make(*values, start: str = '2025-06-01T14:00'):
        start_time = datetime.fromisoformat(start)
        return [
            make_hourly_forecast(
                time=(start_time + timedelta(hours=i)).strftime('%Y-%m-%dT%H:%M'),
                precipitation=precipitation,
                precipitation_probability=probability
            )
            for i, (precipitation, probability) in enumerate(values)
        ]

    return _make


@pytest.fixture
def make_weather_data(make_hourly_forecast):
    def _make(hourly=None, temperature: int = 31, weather_code: int = 2) -> WeatherData:
        return WeatherData(
            current=CurrentWeather(
                temperature=temperature,
                humidity=74,
                weather_code=weather_code,
                wind_speed=12,
                wind_direction=220,
                pressure=1008,
                visibility=24,
                uv_index=6.5,
                time='2025-06-01T13:30'
            ),
            hourly=hourly if hourly is not None else [make_hourly_forecast()],
            location=Location(
                name='University of Santo Tomas, Manila',
                latitude=14.6091,
                longitude=120.9899
            )
        )

    return _make


@pytest.fixture
def openmeteo_payload():
    """Resposta /forecast do Open-Meteo (30 horas, como forecast_days=2 parcial)"""
    hours = 30
    start = datetime(2025, 6, 1, 0, 0)
    return {
        'latitude': 14.625,
        'longitude': 121.0,
        'timezone': 'Asia/Manila',
        'current': {
            'time': '2025-06-01T13:30',
            'interval': 900,
            'temperature_2m': 31.5,
            'relative_humidity_2m': 74,
            'weather_code': 2,
            'wind_speed_10m': 12.4,
            'wind_direction_10m': 220,
            'surface_pressure': 1007.5,
            'visibility': 24140.0,
            'uv_index': 6.55,
        },
        'hourly': {
            'time': [(start + timedelta(hours=i)).strftime('%Y-%m-%dT%H:%M') for i in range(hours)],
            'temperature_2m': [27.5 + (i % 5) for i in range(hours)],
            'weather_code': [61 if i % 6 == 0 else 2 for i in range(hours)],
            'precipitation': [0.5 * (i % 3) for i in range(hours)],
            'precipitation_probability': [10 * (i % 10) for i in range(hours)],
            'relative_humidity_2m': [70 + (i % 8) for i in range(hours)],
            'wind_speed_10m': [8.5 + (i % 4) for i in range(hours)],
        },
    }
