"""
Input Adapter: Lambda Handler HTTP
Presentation Layer: gerencia requisições HTTP e delega para use cases
"""
import asyncio

from aws_lambda_powertools.event_handler import APIGatewayRestResolver, CORSConfig
from aws_lambda_powertools.utilities.typing import LambdaContext

from ust_weather.domain.exceptions import ExhaustedFallbackException
from ust_weather.infrastructure.adapters.input.exception_handler_service import ExceptionHandlerService
from ust_weather.infrastructure.factory import (
    get_cached_weather_data_use_case,
    get_dashboard_snapshot_use_case,
)
from ust_weather.shared.config.logger_config import get_logger
from ust_weather.shared.config.settings import CORS_ORIGIN

logger = get_logger()

app = APIGatewayRestResolver(cors=CORSConfig(allow_origin=CORS_ORIGIN))

# =============================
# Global Event Loop (persistente entre invocações Lambda)
# =============================
_global_event_loop = None

# =============================
# Exception Handlers (Delegados para ExceptionHandlerService)
# =============================

exception_service = ExceptionHandlerService()

app.not_found(exception_service.handle_not_found)
app.exception_handler(ExhaustedFallbackException)(exception_service.handle_exhausted_fallback)
app.exception_handler(Exception)(exception_service.handle_unexpected_error)


# =============================
# Routes
# =============================

@app.get("/api/weather")
def get_weather_route():
    """
    GET /api/weather

    Condições atuais + 24h de previsão horária do campus (cache multi-camada)
    """
    use_case = get_cached_weather_data_use_case()
    weather = run_async(use_case.execute())
    return weather.to_dict()


@app.get("/api/weather/dashboard")
def get_dashboard_route():
    """
    GET /api/weather/dashboard

    WeatherData + nível de alerta, notificação de chuva, alerta de enchente,
    chance na próxima hora, totais 24h, riscos de enchente e eventos de chuva
    """
    use_case = get_dashboard_snapshot_use_case()
    snapshot = run_async(use_case.execute())
    return snapshot.to_api_response()


# =============================
# Lambda Handler
# =============================

@logger.inject_lambda_context()
def lambda_handler(event, context: LambdaContext):
    """
    AWS Lambda main function

    Available routes:
    - GET /api/weather
    - GET /api/weather/dashboard
    """
    headers = event.get('headers', {}) or {}
    request_context = event.get('requestContext', {}) or {}
    identity = request_context.get('identity', {}) or {}

    logger.info(
        "Requisição Lambda recebida",
        rota=event.get('path', 'N/A'),
        metodo=event.get('httpMethod', 'N/A'),
        request_id=getattr(context, 'aws_request_id', 'N/A'),
        source_ip=identity.get('sourceIp', 'N/A'),
        session_id=headers.get('x-session-id', 'N/A')
    )

    response = app.resolve(event, context)

    status_code = response.get('statusCode', 'N/A')
    logger.info(
        "Requisição Lambda concluída",
        status_code=status_code,
        sucesso=status_code == 200
    )

    return response


def get_or_create_event_loop():
    """
    Retorna event loop global persistente

    Reutiliza o loop entre invocações (warm starts): sessões aiohttp/aioboto3
    e o refresh em andamento continuam válidos
    """
    global _global_event_loop

    if _global_event_loop is not None and not _global_event_loop.is_closed():
        return _global_event_loop

    _global_event_loop = asyncio.new_event_loop()
    asyncio.set_event_loop(_global_event_loop)

    return _global_event_loop


def run_async(coro):
    """
    Executa coroutine no event loop global (NÃO fecha o loop)
    """
    loop = get_or_create_event_loop()
    return loop.run_until_complete(coro)
