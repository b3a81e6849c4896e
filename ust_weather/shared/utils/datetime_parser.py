"""
DateTime Parser Utility
Parsing e formatação de timestamps do provider (horário local de Manila)
"""
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from ust_weather.shared.utils.clock import ensure_aware


class DateTimeParser:
    """Parse/format de timestamps ISO-8601 do Open-Meteo"""

    DEFAULT_TIMEZONE = "Asia/Manila"

    @staticmethod
    def parse_forecast_time(value: str, timezone: str = DEFAULT_TIMEZONE) -> datetime:
        """
        Converte timestamp ISO-8601 em datetime timezone-aware

        O Open-Meteo retorna horários locais sem offset (ex: "2025-06-01T14:00")
        quando `timezone` é informado na requisição; nesse caso o horário é
        interpretado no timezone do deployment.

        Args:
            value: Timestamp ISO-8601 (com ou sem offset, aceita sufixo "Z")
            timezone: Timezone usado para timestamps sem offset

        Returns:
            datetime com tzinfo

        Raises:
            ValueError: Se o formato for inválido
        """
        if value.endswith('Z'):
            value = value[:-1] + '+00:00'

        parsed = datetime.fromisoformat(value)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=ZoneInfo(timezone))
        return parsed

    @staticmethod
    def format_clock_time(
        moment: datetime,
        timezone: str = DEFAULT_TIMEZONE
    ) -> str:
        """
        Formata hora no estilo en-PH ("02:00 PM")

        Examples:
            >>> DateTimeParser.format_clock_time(datetime(2025, 6, 1, 6, 0, tzinfo=ZoneInfo("UTC")))
            '02:00 PM'
        """
        return ensure_aware(moment).astimezone(ZoneInfo(timezone)).strftime('%I:%M %p')

    @staticmethod
    def try_parse_forecast_time(value: Optional[str]) -> Optional[datetime]:
        """Versão tolerante de parse_forecast_time (None se inválido)"""
        if not value:
            return None
        try:
            return DateTimeParser.parse_forecast_time(value)
        except ValueError:
            return None
