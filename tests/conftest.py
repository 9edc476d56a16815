"""Fixtures compartilhadas dos testes do importador."""
import csv

import pytest

from hubspot_importer.file_processor import EXPECTED_COLUMNS


@pytest.fixture
def write_csv(tmp_path):
    """Grava um CSV de propriedades e devolve o caminho."""

    def _write(rows, filename="propriedades.csv", columns=None):
        path = tmp_path / filename
        with open(path, "w", newline="", encoding="utf-8") as handle:
            writer = csv.DictWriter(handle, fieldnames=columns or EXPECTED_COLUMNS, extrasaction="ignore")
            writer.writeheader()
            for row in rows:
                writer.writerow(row)
        return str(path)

    return _write


@pytest.fixture
def contact_row():
    return {
        "objectType": "contact",
        "name": "cpf_cliente",
        "label": "CPF do Cliente",
        "description": "Documento do cliente",
        "groupName": "contactinformation",
        "type": "string",
        "fieldType": "text",
        "options": "",
    }


@pytest.fixture
def deal_enum_row():
    return {
        "objectType": "deal",
        "name": "aprovado",
        "label": "Aprovado",
        "description": "Negócio aprovado pelo comitê",
        "groupName": "dealinformation",
        "type": "enumeration",
        "fieldType": "select",
        "options": "Yes|No",
    }
