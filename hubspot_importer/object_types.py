"""
Tipos de objeto do HubSpot que aceitam propriedades personalizadas
"""
from enum import Enum
from typing import Optional


class ObjectType(Enum):
    CONTACT = 'contact'
    DEAL = 'deal'
    TICKET = 'ticket'


def parse_object_type(raw: Optional[str]) -> Optional[ObjectType]:
    """
    Converte o valor da coluna objectType do CSV

    Args:
        raw: Valor bruto (ex: ' Contact ', 'deal')

    Returns:
        ObjectType correspondente ou None se vazio/não suportado
    """
    if raw is None:
        return None

    normalized = str(raw).strip().lower()
    if not normalized:
        return None

    try:
        return ObjectType(normalized)
    except ValueError:
        return None
