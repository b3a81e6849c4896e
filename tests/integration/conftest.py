"""
Fixtures compartilhadas para testes de integração
"""
import json
from typing import Any, Dict, Optional

import pytest


class MockContext:
    """Mock do Lambda Context para testes locais"""
    def __init__(self):
        self.function_name = 'ust-weather-api'
        self.function_version = '$LATEST'
        self.invoked_function_arn = 'arn:aws:lambda:ap-southeast-1:123456789012:function:ust-weather-api'
        self.memory_limit_in_mb = '256'
        self.aws_request_id = 'test-request-id-12345'
        self.log_group_name = '/aws/lambda/ust-weather-api'
        self.log_stream_name = '2025/06/01/[$LATEST]test'

    def get_remaining_time_in_millis(self):
        return 30000  # 30 segundos


@pytest.fixture
def mock_context():
    """Fixture que retorna MockContext para todos os testes"""
    return MockContext()


def build_api_gateway_event(
    method: str,
    path: str,
    query_parameters: Optional[Dict[str, str]] = None,
    body: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Builder genérico para eventos do API Gateway

    Args:
        method: HTTP method (GET, POST, etc)
        path: Request path (/api/weather)
        query_parameters: Query string params dict
        body: Request body dict (will be JSON encoded)
    """
    return {
        'resource': path,
        'path': path,
        'httpMethod': method,
        'headers': {
            'Accept': 'application/json',
            'Content-Type': 'application/json',
            'x-session-id': 'integration-test'
        },
        'requestContext': {
            'identity': {'sourceIp': '127.0.0.1'}
        },
        'pathParameters': None,
        'queryStringParameters': query_parameters,
        'body': json.dumps(body) if body else None,
        'isBase64Encoded': False
    }


@pytest.fixture
def weather_event():
    """Evento GET /api/weather"""
    return build_api_gateway_event('GET', '/api/weather')


@pytest.fixture
def dashboard_event():
    """Evento GET /api/weather/dashboard"""
    return build_api_gateway_event('GET', '/api/weather/dashboard')


@pytest.fixture
def unknown_route_event():
    return build_api_gateway_event('GET', '/api/cities')
