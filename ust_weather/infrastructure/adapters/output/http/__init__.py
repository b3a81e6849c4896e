"""HTTP adapters (sessão aiohttp compartilhada + fetch resiliente)"""

from ust_weather.infrastructure.adapters.output.http.aiohttp_session_manager import (
    AiohttpSessionManager,
    get_aiohttp_session_manager
)
from ust_weather.infrastructure.adapters.output.http.resilient_fetcher import ResilientFetcher

__all__ = ['AiohttpSessionManager', 'get_aiohttp_session_manager', 'ResilientFetcher']
