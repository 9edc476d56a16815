"""
Utilitários do importador de propriedades HubSpot

Módulos disponíveis:
- listar_propriedades: Listagem das propriedades existentes por tipo de objeto
"""

__all__ = [
    'listar_propriedades'
]
