"""DTOs - contratos de saída dos use cases"""

from ust_weather.application.dtos.responses import DashboardSnapshotResponse

__all__ = ['DashboardSnapshotResponse']
