"""
Primitivos de alertas (tipos) compartilhados pelo domínio.
Separados para evitar ciclos entre serviços e entidades.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AlertLevelType(Enum):
    """Níveis de risco exibidos no dashboard"""
    SAFE = "safe"
    WARNING = "warning"
    DANGER = "danger"


@dataclass(frozen=True)
class AlertLevel:
    """Nível de alerta derivado (nunca persistido)"""
    level: AlertLevelType
    message: str
    icon: str

    def to_dict(self) -> dict:
        """Converte para dicionário para resposta da API"""
        return {
            'level': self.level.value,
            'message': self.message,
            'icon': self.icon,
        }
