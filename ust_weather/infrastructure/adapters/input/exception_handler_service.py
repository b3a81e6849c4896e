"""
Exception Handler Service
Centraliza tratamento de exceções com logging estruturado
"""
import json

from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.event_handler.exceptions import NotFoundError

from ust_weather.domain.exceptions import ExhaustedFallbackException
from ust_weather.shared.config.logger_config import logger as app_logger


class ExceptionHandlerService:
    """
    Service para centralizar tratamento de exceções da aplicação
    Responsável por converter exceções em respostas HTTP apropriadas
    """
    logger = app_logger

    def __init__(self, logger=app_logger):
        # Permite injeção de logger compartilhado para manter contexto de correlação
        if logger:
            ExceptionHandlerService.logger = logger

    @staticmethod
    def handle_exhausted_fallback(ex: ExhaustedFallbackException) -> Response:
        """Handle 503 - Nenhuma camada tem dados (rede falhou e sem snapshot)"""
        ExceptionHandlerService.logger.error(
            "Weather data unavailable",
            error=str(ex),
            details=ex.details
        )
        return Response(
            status_code=503,
            content_type="application/json",
            body=json.dumps({
                "type": "ExhaustedFallbackException",
                "error": "Weather data unavailable",
                "message": str(ex)
            })
        )

    @staticmethod
    def handle_not_found(ex: NotFoundError) -> Response:
        """Handle 404 - Rota inexistente"""
        ExceptionHandlerService.logger.warning("Route not found", error=str(ex))
        return Response(
            status_code=404,
            content_type="application/json",
            body=json.dumps({
                "type": "NotFoundError",
                "error": "Not found",
                "message": "Route not found"
            })
        )

    @staticmethod
    def handle_unexpected_error(ex: Exception) -> Response:
        """Handle 500 - Unexpected errors"""
        ExceptionHandlerService.logger.error("Unexpected error", error=str(ex), exc_info=True)
        return Response(
            status_code=500,
            content_type="application/json",
            body=json.dumps({
                "error": "Internal server error",
                "message": "An unexpected error occurred"
            })
        )
