"""
Domain Constants - Todas as constantes da aplicação centralizadas
Valores fixos do contrato (não configuráveis em runtime)
"""


class API:
    """Constantes da API Open-Meteo"""

    OPENMETEO_FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
    TIMEZONE = "Asia/Manila"
    FORECAST_DAYS = 2

    CURRENT_FIELDS = (
        'temperature_2m',
        'relative_humidity_2m',
        'weather_code',
        'wind_speed_10m',
        'wind_direction_10m',
        'surface_pressure',
        'visibility',
        'uv_index',
    )
    HOURLY_FIELDS = (
        'temperature_2m',
        'weather_code',
        'precipitation',
        'precipitation_probability',
        'relative_humidity_2m',
        'wind_speed_10m',
    )

    # Resiliência HTTP
    REQUEST_TIMEOUT_SECONDS = 10.0  # por tentativa
    MAX_RETRIES = 2  # tentativas adicionais (3 no total)
    BACKOFF_BASE_SECONDS = 0.3  # 0.3s, 0.6s, 1.2s...

    # Pool de conexões
    HTTP_CONNECTION_LIMIT = 100
    HTTP_CONNECTION_LIMIT_PER_HOST = 30
    DNS_CACHE_TTL = 300  # segundos


class Cache:
    """Constantes de cache"""

    # Janela de frescor (memória e storage persistente)
    FRESHNESS_WINDOW_MS = 5 * 60 * 1000

    # Chaves versionadas: mudar o sufixo invalida entradas antigas
    VALUE_KEY = "weather_cache_v1"
    TIMESTAMP_KEY = "weather_cache_ts_v1"

    # Auto-refresh do dashboard
    AUTO_REFRESH_INTERVAL_SECONDS = 10 * 60


class Forecast:
    """Janelas de tempo sobre a série horária"""

    HOURLY_LIMIT = 24  # entradas mantidas no modelo interno
    ALERT_WINDOW_HOURS = 3
    FLOOD_WINDOW_HOURS = 6
    AGGREGATE_WINDOW_HOURS = 24


class Location:
    """Localização fixa do dashboard (University of Santo Tomas)"""

    NAME = "University of Santo Tomas, Manila"
    LATITUDE = 14.6091
    LONGITUDE = 120.9899


class AlertThresholds:
    """Thresholds de precipitação (mm) e probabilidade (%) - comparações estritas"""

    DANGER_PRECIPITATION = 20.0
    DANGER_PROBABILITY = 80.0
    MODERATE_PRECIPITATION = 5.0
    MODERATE_PROBABILITY = 50.0
    LIGHT_PRECIPITATION = 0.0
    LIGHT_PROBABILITY = 30.0

    NOTIFICATION_PROBABILITY = 50.0
    NOTIFICATION_HEAVY_PRECIPITATION = 20.0
    NOTIFICATION_MODERATE_PRECIPITATION = 5.0

    FLOOD_CUMULATIVE_PRECIPITATION = 20.0


class Messages:
    """Strings exatas consumidas pela UI"""

    DANGER = "⚠️ High flood risk! Heavy rain expected. Avoid low-lying areas near UST."
    DANGER_ICON = "🚨"
    WARNING_MODERATE = "🌧️ Rain expected within 3 hours. Consider bringing an umbrella."
    WARNING_MODERATE_ICON = "⚠️"
    WARNING_LIGHT = "🌦️ Light rain possible. Keep an eye on the weather."
    WARNING_LIGHT_ICON = "☁️"
    SAFE = "☀️ Clear conditions expected. Safe to be outdoors."
    SAFE_ICON = "✅"

    NEXT_HOUR_HEAVY = "🚨 Heavy rain expected in 1 hour! Possible flooding near UST."
    NEXT_HOUR_MODERATE = "🌧️ Rain expected in 1 hour. Bring an umbrella!"
    NEXT_HOUR_LIGHT = "🌦️ Light rain expected in 1 hour."

    FETCH_FAILED = "Failed to fetch weather data. Please try again later."


class WeatherCodes:
    """Catálogo WMO weather codes (Open-Meteo) → (descrição, ícone)"""

    UNKNOWN = ("Unknown", "❓")

    CODES = {
        0: ("Clear sky", "☀️"),
        1: ("Mainly clear", "🌤️"),
        2: ("Partly cloudy", "⛅"),
        3: ("Overcast", "☁️"),
        45: ("Fog", "🌫️"),
        48: ("Depositing rime fog", "🌫️"),
        51: ("Light drizzle", "🌦️"),
        53: ("Moderate drizzle", "🌦️"),
        55: ("Dense drizzle", "🌦️"),
        61: ("Slight rain", "🌧️"),
        63: ("Moderate rain", "🌧️"),
        65: ("Heavy rain", "🌧️"),
        71: ("Slight snow", "❄️"),
        73: ("Moderate snow", "❄️"),
        75: ("Heavy snow", "❄️"),
        77: ("Snow grains", "❄️"),
        80: ("Slight rain showers", "🌦️"),
        81: ("Moderate rain showers", "🌦️"),
        82: ("Violent rain showers", "🌦️"),
        85: ("Slight snow showers", "🌨️"),
        86: ("Heavy snow showers", "🌨️"),
        95: ("Thunderstorm", "⛈️"),
        96: ("Thunderstorm with slight hail", "⛈️"),
        99: ("Thunderstorm with heavy hail", "⛈️"),
    }

    @classmethod
    def describe(cls, code: int) -> tuple:
        """Retorna (descrição, ícone) para um WMO code"""
        return cls.CODES.get(code, cls.UNKNOWN)
