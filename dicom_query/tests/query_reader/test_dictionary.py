import pytest
from pydicom.tag import BaseTag

from dicom_query.query_reader.dictionary import DicomDictionary, is_private_group


@pytest.fixture
def dictionary():
    yield DicomDictionary()


@pytest.mark.parametrize(
    "tag, vr",
    [
        (0x00100010, "PN"),
        (0x00080060, "CS"),
        (0x00280010, "US"),
        (0x7FE00010, "OB or OW"),
        (0x00280106, "US or SS"),
        (0x60003000, "OB or OW"),
    ],
)
def test_standard_dictionary_vr(dictionary, tag, vr):
    assert dictionary.dictionary_vr(BaseTag(tag)) == vr


@pytest.mark.parametrize("tag", [0x00000000, 0x00111234, 0x00091010])
def test_unknown_dictionary_vr(dictionary, tag):
    assert dictionary.dictionary_vr(BaseTag(tag)) == ""


@pytest.mark.parametrize(
    "group, private",
    [(0x0009, True), (0x0029, True), (0x0010, False), (0x0007, False), (0xFFFF, False)],
)
def test_private_group(group, private):
    assert is_private_group(group) is private


def test_resolve_private_tag(dictionary):
    tag = dictionary.resolve_private_tag("ACME 1.0", BaseTag(0x00090010))
    assert tag == 0x00091010
    assert dictionary.dataset[0x00090010].value == "ACME 1.0"


def test_same_creator_gets_same_block(dictionary):
    dictionary.resolve_private_tag("ACME 1.0", BaseTag(0x00090010))
    tag = dictionary.resolve_private_tag("ACME 1.0", BaseTag(0x00090020))
    assert tag == 0x00091020
    assert len(dictionary.dataset) == 1


def test_new_creator_gets_next_block(dictionary):
    dictionary.resolve_private_tag("ACME 1.0", BaseTag(0x00090010))
    tag = dictionary.resolve_private_tag("OTHER", BaseTag(0x00091001))
    assert tag == 0x00091101
    assert dictionary.dataset[0x00090011].value == "OTHER"


@pytest.mark.parametrize("creator, tag", [("ACME", 0x00100010), ("", 0x00091001)])
def test_tag_without_private_block(dictionary, creator, tag):
    assert dictionary.resolve_private_tag(creator, BaseTag(tag)) == tag
    assert len(dictionary.dataset) == 0


def test_private_dictionary_vr(dictionary):
    tag = dictionary.resolve_private_tag("SIEMENS CSA HEADER", BaseTag(0x00291008))
    assert tag == 0x00291008
    assert dictionary.private_creator(tag) == "SIEMENS CSA HEADER"
    assert dictionary.dictionary_vr(tag) == "CS"


def test_unknown_private_creator(dictionary):
    tag = dictionary.resolve_private_tag("ACME 1.0", BaseTag(0x00090010))
    assert dictionary.dictionary_vr(tag) == ""
