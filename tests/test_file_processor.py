"""Testes da leitura do CSV de propriedades."""
import pytest

from hubspot_importer.file_processor import CSVPropertyReader


def test_reads_rows_as_strings_across_chunks(write_csv, contact_row, deal_enum_row):
    rows = [contact_row, deal_enum_row, dict(contact_row, name="telefone", label="123")]
    path = write_csv(rows)

    read = list(CSVPropertyReader(chunk_size=2).iter_rows(path))

    assert [number for number, _ in read] == [1, 2, 3]
    assert read[1][1]["options"] == "Yes|No"
    # números continuam texto e células vazias viram ''
    assert read[2][1]["label"] == "123"
    assert read[0][1]["options"] == ""


def test_missing_column_is_absent_from_row(write_csv, contact_row):
    path = write_csv([contact_row], columns=["objectType", "name", "label"])

    [(_, row)] = list(CSVPropertyReader().iter_rows(path))

    assert row == {"objectType": "contact", "name": "cpf_cliente", "label": "CPF do Cliente"}


def test_header_names_are_trimmed(tmp_path):
    path = tmp_path / "props.csv"
    path.write_text("objectType , name\ncontact,cpf\n", encoding="utf-8")

    [(_, row)] = list(CSVPropertyReader().iter_rows(str(path)))

    assert row == {"objectType": "contact", "name": "cpf"}


def test_utf8_bom_is_ignored(tmp_path):
    path = tmp_path / "props.csv"
    path.write_bytes("objectType,name\ndeal,origem\n".encode("utf-8-sig"))

    [(_, row)] = list(CSVPropertyReader().iter_rows(str(path)))

    assert row["objectType"] == "deal"


def test_empty_file_yields_nothing(tmp_path):
    path = tmp_path / "vazio.csv"
    path.write_text("", encoding="utf-8")

    assert list(CSVPropertyReader().iter_rows(str(path))) == []


def test_header_only_yields_nothing(write_csv):
    assert list(CSVPropertyReader().iter_rows(write_csv([]))) == []


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        list(CSVPropertyReader().iter_rows(str(tmp_path / "nao_existe.csv")))


HEADER = "objectType,name,label,description,groupName,type,fieldType,options\n"


def test_row_with_extra_fields_keeps_first_columns(tmp_path):
    path = tmp_path / "props.csv"
    path.write_text(
        HEADER
        + "contact,a,A,,g,string,text,\n"
        + "contact,b,B,Documento, do cliente,g,string,text,\n"
        + "deal,c,C,,g,string,text,\n",
        encoding="utf-8",
    )

    read = list(CSVPropertyReader(chunk_size=10).iter_rows(str(path)))

    assert [(number, row["name"]) for number, row in read] == [(1, "a"), (2, "b"), (3, "c")]
    assert read[1][1]["description"] == "Documento"
    assert read[1][1]["options"] == "text"
    assert read[2][1]["objectType"] == "deal"


def test_first_row_with_extra_fields_is_not_taken_as_index(tmp_path):
    path = tmp_path / "props.csv"
    path.write_text(
        HEADER
        + "contact,b,B,Documento, do cliente,g,string,text,\n"
        + "deal,c,C,,g,string,text,\n",
        encoding="utf-8",
    )

    read = list(CSVPropertyReader().iter_rows(str(path)))

    assert [row["objectType"] for _, row in read] == ["contact", "deal"]
    assert [row["name"] for _, row in read] == ["b", "c"]


def test_short_row_omits_trailing_columns(tmp_path):
    path = tmp_path / "props.csv"
    path.write_text(HEADER + "contact,cpf,CPF\ndeal,origem,Origem,,,,,\n", encoding="utf-8")

    [(_, short), (_, full)] = list(CSVPropertyReader().iter_rows(str(path)))

    assert short == {"objectType": "contact", "name": "cpf", "label": "CPF"}
    # células presentes mas vazias continuam ''
    assert full["description"] == ""
    assert full["options"] == ""
