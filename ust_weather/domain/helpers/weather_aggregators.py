"""
Weather Aggregators - agregações por janela de tempo sobre a série horária
Helpers puros; "agora" sempre vem de um Clock injetável.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

from ust_weather.domain.constants import Forecast
from ust_weather.domain.entities.weather_data import HourlyForecast
from ust_weather.shared.utils.clock import Clock, ensure_aware, system_clock
from ust_weather.shared.utils.datetime_parser import DateTimeParser
from ust_weather.shared.utils.rounding import round_half_up

NEXT_HOUR_LABEL_PREFIX = "Next hour: "
UNKNOWN_CLOCK_TIME = "--:--"


@dataclass(frozen=True)
class NextHourChance:
    value: int  # probabilidade arredondada (%)
    label: str  # "Next hour: 02:00 PM"

    def to_dict(self) -> dict:
        return {'value': self.value, 'label': self.label}


def get_next_hour_chance(
    hourly: Sequence[HourlyForecast],
    now: Optional[datetime] = None,
    clock: Clock = system_clock
) -> NextHourChance:
    """
    Chance de chuva da próxima hora de previsão "cheia"

    Seleciona a primeira entrada com timestamp estritamente após `now`
    (não é uma janela móvel de 60 minutos). Se todas estiverem no passado,
    usa o índice 0.

    Args:
        hourly: Série horária ordenada
        now: Momento de referência (se None, usa clock())
        clock: Fonte de "agora"

    Returns:
        NextHourChance com valor arredondado e label em horário de Manila
    """
    if not hourly:
        return NextHourChance(value=0, label=f"{NEXT_HOUR_LABEL_PREFIX}{UNKNOWN_CLOCK_TIME}")

    if now is None:
        now = clock()
    now = ensure_aware(now)

    target = hourly[0]
    for hour in hourly:
        hour_time = DateTimeParser.try_parse_forecast_time(hour.time)
        if hour_time is not None and hour_time > now:
            target = hour
            break

    target_time = DateTimeParser.try_parse_forecast_time(target.time)
    clock_label = DateTimeParser.format_clock_time(target_time) if target_time else UNKNOWN_CLOCK_TIME

    return NextHourChance(
        value=round_half_up(target.precipitation_probability or 0),
        label=f"{NEXT_HOUR_LABEL_PREFIX}{clock_label}"
    )


def get_rain_total_24h(hourly: Sequence[HourlyForecast]) -> float:
    """Precipitação acumulada (mm) das primeiras 24 entradas"""
    return sum((hour.precipitation or 0) for hour in hourly[:Forecast.AGGREGATE_WINDOW_HOURS])


def get_max_rain_probability_24h(hourly: Sequence[HourlyForecast]) -> float:
    """Maior probabilidade (%) nas primeiras 24 entradas; série vazia → 0"""
    return max(
        ((hour.precipitation_probability or 0) for hour in hourly[:Forecast.AGGREGATE_WINDOW_HOURS]),
        default=0
    )


def format_last_updated(moment: datetime) -> str:
    """Horário da última atualização ("02:05 PM", Manila)"""
    return DateTimeParser.format_clock_time(moment)


def format_time_since(last_updated: datetime, now: Optional[datetime] = None, clock: Clock = system_clock) -> str:
    """
    Tempo decorrido desde a última atualização

    Examples:
        "3m 5s ago", "42s ago"
    """
    if now is None:
        now = clock()
    now = ensure_aware(now)

    elapsed_ms = max(0, int((now - ensure_aware(last_updated)).total_seconds() * 1000))
    minutes = elapsed_ms // 60000
    seconds = (elapsed_ms % 60000) // 1000

    if minutes > 0:
        return f"{minutes}m {seconds}s ago"
    return f"{seconds}s ago"
