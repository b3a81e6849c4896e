"""
UST Weather - núcleo de dados do dashboard de clima da UST (Manila)

Camadas (Clean Architecture):
- domain: entidades, regras de alerta e agregadores (puro, sem I/O)
- application: use cases (cache multi-camada, snapshot do dashboard) e portas
- infrastructure: adapters (Open-Meteo, aiohttp, storage em disco/DynamoDB, Lambda)
- shared: configuração, logging e utilitários
"""

__version__ = "1.0.0"
