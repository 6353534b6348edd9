import pytest

from dicom_query.query.query_spec import DiagnosticCode
from dicom_query.query_reader.cursor import LineCursor
from dicom_query.query_reader.tag_parser import parse_tag, tag_from_text


@pytest.fixture
def reports():
    yield []


def parse(line, reports):
    return parse_tag(LineCursor(line), lambda code, msg: reports.append((code, msg)))


@pytest.mark.parametrize(
    "text, tag",
    [
        ("00100010", 0x00100010),
        ("7fe00010", 0x7FE00010),
        ("0010001", 0),
        ("001000100", 0),
        ("0010001G", 0),
        ("0x100010", 0),
        ("", 0),
    ],
)
def test_tag_from_text(text, tag):
    assert tag_from_text(text) == tag


def test_standard_tag(reports):
    parsed, cursor = parse("00100010=Smith", reports)
    assert parsed.tag == 0x00100010
    assert parsed.creator == ""
    assert (parsed.start, parsed.end) == (0, 8)
    assert cursor.peek() == "="
    assert reports == []


def test_private_creator(reports):
    parsed, cursor = parse("[ACME 1.0]00090010:LO", reports)
    assert parsed.tag == 0x00090010
    assert parsed.creator == "ACME 1.0"
    assert (parsed.start, parsed.end) == (10, 18)
    assert cursor.peek() == ":"


def test_empty_creator_is_no_creator(reports):
    parsed, _ = parse("[]00100010", reports)
    assert parsed.creator == ""
    assert parsed.tag == 0x00100010


def test_unterminated_creator(reports):
    assert parse("[ACME 1.0 00090010=x", reports) is None
    assert len(reports) == 1
    code, message = reports[0]
    assert code == DiagnosticCode.UnterminatedCreatorBlock
    assert message == 'Block is missing the final "]".'


def test_tag_text_ends_at_non_alphanumeric(reports):
    parsed, cursor = parse("00100010 =Smith", reports)
    assert parsed.tag == 0x00100010
    assert cursor.peek() == " "


def test_non_ascii_letters_end_tag_text(reports):
    parsed, _ = parse("00100010é", reports)
    assert parsed.tag == 0x00100010
    assert parsed.end == 8
