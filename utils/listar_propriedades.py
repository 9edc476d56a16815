#!/usr/bin/env python3
"""
Utilitário para listar as propriedades existentes no HubSpot
Útil para conferir nomes e grupos antes de montar o CSV de importação

Uso:
    python -m utils.listar_propriedades contact
    python -m utils.listar_propriedades deal --apenas-personalizadas
"""

import argparse
import logging
from typing import Dict, List

from hubspot_importer.hubspot_client import HubSpotClient
from hubspot_importer.object_types import ObjectType

logger = logging.getLogger(__name__)


def is_custom_property(prop: Dict) -> bool:
    """Propriedades padrão do HubSpot vêm marcadas como hubspotDefined"""
    return not prop.get('hubspotDefined', False)


def format_property(prop: Dict) -> List[str]:
    """Linhas de texto que descrevem uma propriedade"""
    lines = [
        f"   {prop.get('label', 'N/A')}",
        f"      Nome: {prop.get('name', 'N/A')}",
        f"      Tipo: {prop.get('type', 'N/A')} / {prop.get('fieldType', 'N/A')}",
        f"      Grupo: {prop.get('groupName', 'N/A')}",
    ]

    options = prop.get('options') or []
    if options:
        lines.append("      Opções disponíveis:")
        for option in options:
            lines.append(f"         {option.get('value')} = {option.get('label')}")

    return lines


def listar_propriedades(object_type: ObjectType, apenas_personalizadas: bool = False,
                        client: HubSpotClient = None) -> List[Dict]:
    """
    Busca e imprime as propriedades de um tipo de objeto

    Returns:
        Propriedades listadas
    """
    print(f">>> Buscando propriedades de {object_type.value.upper()}...")

    client = client or HubSpotClient()
    properties = client.list_properties(object_type)

    if apenas_personalizadas:
        properties = [prop for prop in properties if is_custom_property(prop)]

    if not properties:
        print("Nenhuma propriedade encontrada")
        return []

    print(f"OK: Encontradas {len(properties)} propriedades")
    for prop in sorted(properties, key=lambda p: p.get('name', '')):
        print("\n".join(format_property(prop)))
        print()  # Linha em branco para separar propriedades

    return properties


def main():
    parser = argparse.ArgumentParser(description='Lista propriedades existentes no HubSpot')
    parser.add_argument('objeto', choices=[t.value for t in ObjectType], help='Tipo de objeto')
    parser.add_argument('--apenas-personalizadas', action='store_true',
                        help='Ignora propriedades padrão do HubSpot')
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)

    try:
        listar_propriedades(ObjectType(args.objeto), args.apenas_personalizadas)
    except ValueError as e:
        logger.error(f"❌ {e}")


if __name__ == "__main__":
    main()
