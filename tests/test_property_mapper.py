"""Testes da conversão de linhas do CSV em propriedades do HubSpot."""
import pytest

from hubspot_importer.config import active_config
from hubspot_importer.models import ResultStatus
from hubspot_importer.object_types import ObjectType, parse_object_type
from hubspot_importer.property_mapper import (
    build_options,
    build_property_definition,
    invalid_object_result,
)


class TestParseObjectType:
    @pytest.mark.parametrize("raw,expected", [
        ("contact", ObjectType.CONTACT),
        ("  Deal ", ObjectType.DEAL),
        ("TICKET", ObjectType.TICKET),
    ])
    def test_supported_kinds(self, raw, expected):
        assert parse_object_type(raw) is expected

    @pytest.mark.parametrize("raw", [None, "", "   ", "company", "contacts"])
    def test_blank_or_unknown_is_none(self, raw):
        assert parse_object_type(raw) is None

    def test_every_kind_has_an_endpoint(self):
        urls = {active_config.get_properties_url(kind) for kind in ObjectType}
        assert len(urls) == len(ObjectType)

    def test_ticket_uses_v3_endpoint(self):
        assert "/crm/v3/properties/tickets" in active_config.get_properties_url(ObjectType.TICKET)


class TestBuildOptions:
    def test_yes_no(self):
        assert build_options("Yes|No") == [
            {"label": "Yes", "value": "yes"},
            {"label": "No", "value": "no"},
        ]

    def test_trims_and_capitalizes_first_letter_only(self):
        assert build_options(" em análise | aPROVADO ") == [
            {"label": "Em análise", "value": "em análise"},
            {"label": "APROVADO", "value": "aprovado"},
        ]

    def test_empty_pieces_are_kept(self):
        assert build_options("a||b")[1] == {"label": "", "value": ""}


class TestBuildPropertyDefinition:
    def test_trims_fields_and_sets_form_field(self, contact_row):
        row = dict(contact_row, name="  cpf_cliente ", label=" CPF do Cliente\t")

        definition = build_property_definition(row)

        assert definition == {
            "name": "cpf_cliente",
            "label": "CPF do Cliente",
            "description": "Documento do cliente",
            "groupName": "contactinformation",
            "type": "string",
            "fieldType": "text",
            "formField": True,
        }

    def test_enumeration_options(self, deal_enum_row):
        definition = build_property_definition(deal_enum_row)

        assert definition["options"] == [
            {"label": "Yes", "value": "yes"},
            {"label": "No", "value": "no"},
        ]
        assert "numberDisplayHint" not in definition

    def test_enumeration_without_options(self, deal_enum_row):
        definition = build_property_definition(dict(deal_enum_row, options="  "))
        assert "options" not in definition

    def test_options_ignored_for_other_types(self, contact_row):
        definition = build_property_definition(dict(contact_row, options="a|b"))
        assert "options" not in definition

    def test_number_display_hint(self, contact_row):
        row = dict(contact_row, type="number", fieldType="number")
        assert build_property_definition(row)["numberDisplayHint"] == "number"

    def test_number_with_other_field_type_has_no_hint(self, contact_row):
        row = dict(contact_row, type="number", fieldType="text")
        assert "numberDisplayHint" not in build_property_definition(row)

    def test_absent_columns_are_omitted(self):
        definition = build_property_definition({"objectType": "deal", "name": "x", "type": "string"})
        assert definition == {"name": "x", "type": "string", "formField": True}


class TestInvalidObjectResult:
    def test_unknown_object_type(self, contact_row):
        result = invalid_object_result(dict(contact_row, objectType=" Company "), 4)

        assert result.status is ResultStatus.INVALID_OBJECT
        assert result.row_number == 4
        assert result.object_type == "company"
        assert result.name == "cpf_cliente"
        assert result.error_message == "Objeto 'company' não reconhecido ou linha CSV incompleta."

    def test_blank_row_defaults_to_not_available(self):
        result = invalid_object_result({"objectType": "", "name": "", "label": None}, 1)

        assert result.object_type == "N/A"
        assert result.name == "N/A"
        assert result.label == "N/A"
