"""
Serviço de domínio para classificação de risco de chuva/alagamento
Regras por thresholds sobre a série horária (funções puras e determinísticas).
"""
from __future__ import annotations

from typing import Optional, Sequence

from ust_weather.domain.alerts.primitives import AlertLevel, AlertLevelType
from ust_weather.domain.constants import AlertThresholds, Forecast, Messages
from ust_weather.domain.entities.weather_data import HourlyForecast


# Tiers avaliados em ordem de prioridade (primeiro match vence)
_DANGER = AlertLevel(AlertLevelType.DANGER, Messages.DANGER, Messages.DANGER_ICON)
_WARNING_MODERATE = AlertLevel(AlertLevelType.WARNING, Messages.WARNING_MODERATE, Messages.WARNING_MODERATE_ICON)
_WARNING_LIGHT = AlertLevel(AlertLevelType.WARNING, Messages.WARNING_LIGHT, Messages.WARNING_LIGHT_ICON)
_SAFE = AlertLevel(AlertLevelType.SAFE, Messages.SAFE, Messages.SAFE_ICON)


class AlertRuleEngine:
    """Classifica as próximas horas em níveis de risco e gera notificações."""

    @staticmethod
    def _any_hour_exceeds(
        hours: Sequence[HourlyForecast],
        precipitation: float,
        probability: float
    ) -> bool:
        return any(
            hour.precipitation > precipitation or hour.precipitation_probability > probability
            for hour in hours
        )

    @staticmethod
    def calculate_alert_level(hourly: Sequence[HourlyForecast]) -> AlertLevel:
        """
        Nível de risco das próximas 3 horas

        Janela é um prefixo estrito da série; com menos de 3 horas avalia o
        que existir, série vazia resulta em `safe`.
        """
        window = list(hourly[:Forecast.ALERT_WINDOW_HOURS])

        if AlertRuleEngine._any_hour_exceeds(
            window, AlertThresholds.DANGER_PRECIPITATION, AlertThresholds.DANGER_PROBABILITY
        ):
            return _DANGER

        if AlertRuleEngine._any_hour_exceeds(
            window, AlertThresholds.MODERATE_PRECIPITATION, AlertThresholds.MODERATE_PROBABILITY
        ):
            return _WARNING_MODERATE

        if AlertRuleEngine._any_hour_exceeds(
            window, AlertThresholds.LIGHT_PRECIPITATION, AlertThresholds.LIGHT_PROBABILITY
        ):
            return _WARNING_LIGHT

        return _SAFE

    @staticmethod
    def get_rain_notification(hourly: Sequence[HourlyForecast]) -> Optional[str]:
        """
        Mensagem sobre a próxima hora (apenas índice 0)

        Independente da janela de 3 horas de calculate_alert_level.

        Returns:
            Mensagem de notificação ou None se probabilidade <= 50%
        """
        if not hourly:
            return None

        next_hour = hourly[0]
        if next_hour.precipitation_probability <= AlertThresholds.NOTIFICATION_PROBABILITY:
            return None

        if next_hour.precipitation > AlertThresholds.NOTIFICATION_HEAVY_PRECIPITATION:
            return Messages.NEXT_HOUR_HEAVY
        if next_hour.precipitation > AlertThresholds.NOTIFICATION_MODERATE_PRECIPITATION:
            return Messages.NEXT_HOUR_MODERATE
        return Messages.NEXT_HOUR_LIGHT

    @staticmethod
    def check_flood_warning(hourly: Sequence[HourlyForecast]) -> bool:
        """Volume acumulado das próximas 6 horas > 20mm (sem peso de probabilidade)"""
        total = sum(hour.precipitation for hour in hourly[:Forecast.FLOOD_WINDOW_HOURS])
        return total > AlertThresholds.FLOOD_CUMULATIVE_PRECIPITATION
