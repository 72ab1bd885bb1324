"""Tests for urlshort.decoding — YAML/JSON redirect documents."""

from pathlib import Path

import pytest

from urlshort.decoding import load_records, parse_json, parse_yaml, records_from_data
from urlshort.errors import ConfigurationError, RecordDecodeError
from urlshort.records import RedirectRecord

YAML_DOC = """\
- path: /urlshort
  url: https://github.com/gophercises/urlshort
- path: /urlshort-final
  url: https://github.com/gophercises/urlshort/tree/solution
"""


class TestParseYaml:
    def test_records_in_order(self) -> None:
        records = parse_yaml(YAML_DOC)
        assert records == (
            RedirectRecord("/urlshort", "https://github.com/gophercises/urlshort"),
            RedirectRecord(
                "/urlshort-final", "https://github.com/gophercises/urlshort/tree/solution"
            ),
        )

    def test_accepts_bytes(self) -> None:
        records = parse_yaml(YAML_DOC.encode("utf-8"))
        assert len(records) == 2

    def test_empty_document(self) -> None:
        assert parse_yaml("") == ()

    def test_empty_list(self) -> None:
        assert parse_yaml("[]") == ()

    def test_duplicates_are_kept(self) -> None:
        doc = "- {path: a, url: '1'}\n- {path: b, url: '2'}\n- {path: a, url: '3'}\n"
        assert [r.url for r in parse_yaml(doc)] == ["1", "2", "3"]

    def test_extra_fields_ignored(self) -> None:
        records = parse_yaml("- path: /a\n  url: https://a.example\n  note: legacy\n")
        assert records == (RedirectRecord("/a", "https://a.example"),)

    def test_non_list_top_level(self) -> None:
        with pytest.raises(RecordDecodeError, match="expected a list"):
            parse_yaml("path: /a\nurl: https://a.example\n")

    def test_scalar_top_level(self) -> None:
        with pytest.raises(RecordDecodeError):
            parse_yaml("just a string")

    def test_syntax_error(self) -> None:
        with pytest.raises(RecordDecodeError, match="invalid YAML"):
            parse_yaml("- path: [unclosed\n")

    def test_entry_not_a_mapping(self) -> None:
        with pytest.raises(RecordDecodeError) as exc_info:
            parse_yaml("- path: /a\n  url: https://a.example\n- /b\n")
        assert exc_info.value.index == 1

    def test_missing_url(self) -> None:
        with pytest.raises(RecordDecodeError, match="missing 'url'"):
            parse_yaml("- path: /a\n")

    def test_non_string_field(self) -> None:
        with pytest.raises(RecordDecodeError, match="'path' must be a string"):
            parse_yaml("- path: 42\n  url: https://a.example\n")

    def test_error_names_source(self) -> None:
        with pytest.raises(RecordDecodeError) as exc_info:
            parse_yaml("{}", source="redirects.yaml")
        assert str(exc_info.value).startswith("redirects.yaml: ")

    def test_invalid_utf8(self) -> None:
        with pytest.raises(RecordDecodeError, match="invalid YAML"):
            parse_yaml(b"- path: /a\n  url: \xc3\x28\n")


class TestParseJson:
    def test_records(self) -> None:
        records = parse_json('[{"path": "/go", "url": "https://golang.org"}]')
        assert records == (RedirectRecord("/go", "https://golang.org"),)

    def test_empty_document(self) -> None:
        assert parse_json(b"  \n") == ()

    def test_null(self) -> None:
        assert parse_json("null") == ()

    def test_object_top_level(self) -> None:
        with pytest.raises(RecordDecodeError, match="got dict"):
            parse_json('{"path": "/go", "url": "https://golang.org"}')

    def test_syntax_error(self) -> None:
        with pytest.raises(RecordDecodeError, match="invalid JSON"):
            parse_json("[{")

    def test_invalid_utf8(self) -> None:
        with pytest.raises(RecordDecodeError, match="invalid JSON"):
            parse_json(b'[{"path": "/a", "url": "\xc3\x28"}]')


class TestRecordsFromData:
    def test_tuple_top_level_rejected(self) -> None:
        with pytest.raises(RecordDecodeError):
            records_from_data(({"path": "/a", "url": "b"},))

    def test_error_str_includes_index(self) -> None:
        with pytest.raises(RecordDecodeError) as exc_info:
            records_from_data([{"path": "/a"}], source="<test>")
        assert str(exc_info.value) == "<test>: entry 0: missing 'url'"


class TestLoadRecords:
    def test_yaml_file(self, tmp_path: Path) -> None:
        path = tmp_path / "redirects.yaml"
        path.write_text(YAML_DOC)
        assert len(load_records(path)) == 2

    def test_yml_suffix(self, tmp_path: Path) -> None:
        path = tmp_path / "redirects.yml"
        path.write_text(YAML_DOC)
        assert len(load_records(str(path))) == 2

    def test_json_file(self, tmp_path: Path) -> None:
        path = tmp_path / "redirects.json"
        path.write_text('[{"path": "/go", "url": "https://golang.org"}]')
        assert load_records(path) == (RedirectRecord("/go", "https://golang.org"),)

    def test_unsupported_suffix(self, tmp_path: Path) -> None:
        path = tmp_path / "redirects.toml"
        path.write_text("")
        with pytest.raises(ConfigurationError, match="Unsupported"):
            load_records(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="not found"):
            load_records(tmp_path / "nope.yaml")

    def test_malformed_file_names_path(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("not: a list\n")
        with pytest.raises(RecordDecodeError) as exc_info:
            load_records(path)
        assert exc_info.value.source == str(path)

    def test_directory_is_configuration_error(self, tmp_path: Path) -> None:
        path = tmp_path / "redirects.yaml"
        path.mkdir()
        with pytest.raises(ConfigurationError, match="Cannot read"):
            load_records(path)
