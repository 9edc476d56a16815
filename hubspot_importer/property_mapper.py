"""
Conversão das linhas do CSV em definições de propriedade do HubSpot
"""
import logging
from typing import Dict, List, Optional, Any

from hubspot_importer.models import NOT_AVAILABLE, ResultRecord, ResultStatus

logger = logging.getLogger(__name__)

# Campos de texto copiados da linha para a definição (sempre com trim)
PROPERTY_FIELDS = ['name', 'label', 'description', 'groupName', 'type', 'fieldType']

OPTIONS_SEPARATOR = '|'


def _clean(value: Any) -> Optional[str]:
    """Aplica trim em valores de texto, preservando ausentes como None"""
    if value is None:
        return None
    return str(value).strip()


def build_options(option_string: str) -> List[Dict[str, str]]:
    """
    Converte uma string de opções separadas por '|' em opções de enumeração

    Args:
        option_string: Ex: 'sim|não|talvez'

    Returns:
        Lista de dicts com 'label' (primeira letra maiúscula) e 'value' (minúsculo)
    """
    options = []
    for option in option_string.split(OPTIONS_SEPARATOR):
        option = option.strip()
        options.append({
            'label': option[:1].upper() + option[1:],
            'value': option.lower()
        })
    return options


def build_property_definition(row: Dict[str, Any]) -> Dict[str, Any]:
    """
    Monta o corpo JSON da propriedade a partir de uma linha do CSV

    Colunas ausentes no CSV não entram na definição.

    Args:
        row: Linha do CSV (objectType, name, label, description, groupName,
             type, fieldType, options)

    Returns:
        Definição da propriedade pronta para envio
    """
    definition = {}
    for field_name in PROPERTY_FIELDS:
        value = _clean(row.get(field_name))
        if value is not None:
            definition[field_name] = value
    definition['formField'] = True

    property_type = definition.get('type')

    # Opções apenas para enumerações com a coluna options preenchida
    options = _clean(row.get('options'))
    if property_type == 'enumeration' and options:
        definition['options'] = build_options(options)

    if property_type == 'number' and definition.get('fieldType') == 'number':
        definition['numberDisplayHint'] = 'number'

    return definition


def invalid_object_result(row: Dict[str, Any], row_number: int) -> ResultRecord:
    """
    Registra uma linha com objectType vazio ou não suportado

    Args:
        row: Linha do CSV
        row_number: Número da linha de dados (1 = primeira após o cabeçalho)
    """
    raw_object_type = _clean(row.get('objectType')) or ''
    object_type = raw_object_type.lower()
    name = _clean(row.get('name'))
    label = _clean(row.get('label'))

    logger.warning(
        f"⚠️ Objeto inválido ou linha malformada ignorada "
        f"(Linha: {row_number}, Propriedade: {name or NOT_AVAILABLE}, Objeto: {object_type or NOT_AVAILABLE})"
    )

    return ResultRecord(
        row_number=row_number,
        object_type=object_type or NOT_AVAILABLE,
        name=name or NOT_AVAILABLE,
        label=label or NOT_AVAILABLE,
        status=ResultStatus.INVALID_OBJECT,
        error_message=f"Objeto '{object_type}' não reconhecido ou linha CSV incompleta."
    )
