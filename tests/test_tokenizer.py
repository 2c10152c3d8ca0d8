# tests/test_tokenizer.py

from __future__ import annotations

from gedcom_importer.loader import load_file, tokenize_line, tokenize_text
from gedcom_importer.utils import mock_file_path


def test_tokenize_line_simple_head() -> None:
    token = tokenize_line("0 HEAD", lineno=1)
    assert token.lineno == 1
    assert token.level == 0
    assert token.pointer is None
    assert token.tag == "HEAD"
    assert token.value is None


def test_tokenize_line_with_pointer_and_tag_only() -> None:
    token = tokenize_line("0 @I1@ INDI", lineno=1)
    assert token.level == 0
    assert token.pointer == "@I1@"
    assert token.tag == "INDI"
    assert token.value is None


def test_tokenize_line_entity_with_inline_text() -> None:
    token = tokenize_line("0 @N1@ NOTE Some text here", lineno=3)
    assert token.pointer == "@N1@"
    assert token.tag == "NOTE"
    assert token.value == "Some text here"


def test_tokenize_line_with_value() -> None:
    token = tokenize_line("1 NOTE This is a test note", lineno=10)
    assert token.level == 1
    assert token.pointer is None
    assert token.tag == "NOTE"
    assert token.value == "This is a test note"


def test_tokenize_line_pointer_value_is_kept_as_value() -> None:
    token = tokenize_line("1 HUSB @I1@")
    assert token.tag == "HUSB"
    assert token.value == "@I1@"
    assert token.pointer is None


def test_tokenize_line_with_bom_on_first_line() -> None:
    token = tokenize_line("\ufeff0 HEAD", lineno=1)
    assert token is not None
    assert token.level == 0
    assert token.tag == "HEAD"


def test_tokenize_line_malformed_returns_none() -> None:
    assert tokenize_line("X HEAD") is None
    assert tokenize_line("0 ") is None
    assert tokenize_line("just some text") is None


def test_tokenize_text_skips_blank_and_malformed_lines() -> None:
    text = "0 HEAD\r\n\r\ngarbage line\n1 CHAR UTF-8\n   \n0 TRLR"
    lines = tokenize_text(text)

    assert [(l.level, l.tag) for l in lines] == [(0, "HEAD"), (1, "CHAR"), (0, "TRLR")]
    assert lines[1].value == "UTF-8"


def test_tokenize_text_is_idempotent() -> None:
    text = load_file(mock_file_path("gedcom_1.ged"))
    assert tokenize_text(text) == tokenize_text(text)


def test_tokenize_mock_file() -> None:
    lines = tokenize_text(load_file(mock_file_path("gedcom_1.ged")))

    assert lines, "Expected at least one line from mock GEDCOM file"
    assert lines[0].level == 0
    assert lines[0].tag == "HEAD"
    assert lines[-1].tag == "TRLR"
