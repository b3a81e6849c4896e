"""
Domain Services - Serviços de lógica de negócio pura (sem conhecimento de APIs externas)

IMPORTANTE: Mappers de APIs externas → domain entities pertencem à infrastructure!
- infrastructure/adapters/output/providers/openmeteo/mappers/openmeteo_data_mapper.py
"""

from ust_weather.domain.services.alert_rule_engine import AlertRuleEngine
from ust_weather.domain.services.flood_risk_service import FloodRiskService
from ust_weather.domain.services.rain_prediction_service import RainPredictionService

__all__ = [
    'AlertRuleEngine',
    'FloodRiskService',
    'RainPredictionService'
]
