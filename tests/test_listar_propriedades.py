"""Testes do utilitário de listagem de propriedades."""
from unittest.mock import MagicMock

from hubspot_importer.hubspot_client import HubSpotClient
from hubspot_importer.object_types import ObjectType
from utils.listar_propriedades import format_property, listar_propriedades


PROPERTIES = [
    {"name": "email", "label": "Email", "type": "string", "fieldType": "text",
     "groupName": "contactinformation", "hubspotDefined": True},
    {"name": "origem", "label": "Origem", "type": "enumeration", "fieldType": "select",
     "groupName": "contactinformation",
     "options": [{"label": "Site", "value": "site"}, {"label": "Evento", "value": "evento"}]},
]


def _client():
    client = MagicMock(spec=HubSpotClient)
    client.list_properties.return_value = list(PROPERTIES)
    return client


def test_lists_all_properties(capsys):
    client = _client()

    listed = listar_propriedades(ObjectType.CONTACT, client=client)

    client.list_properties.assert_called_once_with(ObjectType.CONTACT)
    assert [p["name"] for p in listed] == ["email", "origem"]
    out = capsys.readouterr().out
    assert "Encontradas 2 propriedades" in out
    assert "site = Site" in out


def test_only_custom_properties():
    listed = listar_propriedades(ObjectType.CONTACT, apenas_personalizadas=True, client=_client())

    assert [p["name"] for p in listed] == ["origem"]


def test_no_properties(capsys):
    client = _client()
    client.list_properties.return_value = []

    assert listar_propriedades(ObjectType.DEAL, client=client) == []
    assert "Nenhuma propriedade encontrada" in capsys.readouterr().out


def test_format_property_without_options():
    lines = format_property(PROPERTIES[0])

    assert lines[0].strip() == "Email"
    assert "Tipo: string / text" in lines[2]
    assert not any("Opções" in line for line in lines)
