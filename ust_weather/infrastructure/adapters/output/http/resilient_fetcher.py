"""
Resilient Fetcher - GET com timeout por tentativa e retry com backoff exponencial

Regras:
- Cada tentativa é limitada a 10s; timeout conta como falha comum
- Status não-2xx, erro de transporte e timeout são tratados igualmente
- Backoff 0.3s * 2^tentativa (0.3s, 0.6s, ...), sem jitter
- Após esgotar as tentativas, relança o último erro
"""
import asyncio
import json
from typing import Any, Awaitable, Callable, Dict, Optional

import aiohttp
from ddtrace import tracer
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ust_weather.domain.constants import API
from ust_weather.domain.exceptions import FetchException, FetchTimeoutException, NetworkException
from ust_weather.infrastructure.adapters.output.http.aiohttp_session_manager import (
    AiohttpSessionManager,
    get_aiohttp_session_manager,
)
from ust_weather.shared.config.logger_config import get_logger

logger = get_logger(child=True)


class ResilientFetcher:
    """Fetch JSON sem efeitos colaterais (não toca em cache)"""

    def __init__(
        self,
        session_manager: Optional[AiohttpSessionManager] = None,
        timeout_seconds: float = API.REQUEST_TIMEOUT_SECONDS,
        backoff_base_seconds: float = API.BACKOFF_BASE_SECONDS,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep
    ):
        """
        Args:
            session_manager: Gerenciador de sessão aiohttp (singleton se None)
            timeout_seconds: Deadline de cada tentativa
            backoff_base_seconds: Espera antes do primeiro retry
            sleep: Coroutine de espera entre tentativas (injetável para fake clock)
        """
        self.session_manager = session_manager or get_aiohttp_session_manager()
        self.timeout_seconds = timeout_seconds
        self.backoff_base_seconds = backoff_base_seconds
        self._sleep = sleep

    @tracer.wrap(resource="http.fetch_with_retry")
    async def fetch_with_retry(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        max_retries: int = API.MAX_RETRIES
    ) -> Any:
        """
        GET com até `max_retries` tentativas adicionais

        Args:
            url: URL do recurso
            params: Query string
            max_retries: Retries após a primeira tentativa (default 2 → 3 tentativas)

        Returns:
            Corpo JSON decodificado

        Raises:
            FetchTimeoutException: Última tentativa estourou o timeout
            NetworkException: Última tentativa falhou (transporte/status)
        """
        retrying = AsyncRetrying(
            retry=retry_if_exception_type(FetchException),
            stop=stop_after_attempt(max_retries + 1),
            wait=wait_exponential(multiplier=self.backoff_base_seconds, exp_base=2),
            before_sleep=self._log_retry,
            sleep=self._sleep,
            reraise=True
        )

        async for attempt in retrying:
            with attempt:
                return await self._attempt(url, params)

    async def _attempt(self, url: str, params: Optional[Dict[str, Any]]) -> Any:
        try:
            return await asyncio.wait_for(self._get_json(url, params), timeout=self.timeout_seconds)
        except asyncio.TimeoutError as e:
            raise FetchTimeoutException(
                "Request timed out",
                details={"url": url, "timeout_seconds": self.timeout_seconds}
            ) from e
        except FetchException:
            raise
        except (aiohttp.ClientError, OSError, json.JSONDecodeError) as e:
            raise NetworkException(str(e) or "Network error", details={"url": url}) from e
        except Exception as e:
            # Falha desconhecida: normalizada e retentada como erro de rede
            raise NetworkException(
                "Network error",
                details={"url": url, "error_type": type(e).__name__, "reason": str(e)}
            ) from e

    async def _get_json(self, url: str, params: Optional[Dict[str, Any]]) -> Any:
        session = await self.session_manager.get_session()
        async with session.get(url, params=params) as response:
            if not 200 <= response.status < 300:
                raise NetworkException(
                    f"HTTP {response.status}",
                    details={"url": url},
                    status_code=response.status
                )
            return await response.json()

    @staticmethod
    def _log_retry(retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        logger.warning(
            "Weather fetch attempt failed, retrying",
            attempt=retry_state.attempt_number,
            wait_seconds=retry_state.next_action.sleep if retry_state.next_action else None,
            error_type=type(error).__name__ if error else None,
            error=str(error) if error else None
        )
