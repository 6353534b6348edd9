from pydicom.tag import BaseTag

from dicom_query.query.query_spec import DiagnosticCode
from dicom_query.query_reader.cursor import LineCursor
from dicom_query.query_reader.dictionary import VRDictionary
from dicom_query.query_reader.tag_parser import ParsedTag, Reporter
from dicom_query.query_reader.vr import (
    UNKNOWN_VR,
    is_compatible_vr,
    is_placeholder_vr,
    is_valid_vr,
)

VR_SEPARATOR = ":"
VR_LENGTH = 2
# maximum length of the query line excerpt shown in messages
MAX_EXCERPT_LEN = 40


def parse_explicit_vr(
    cursor: LineCursor, tag_start: int, report: Reporter
) -> tuple[str | None, LineCursor]:
    """Parse an optional VR following the tag ID.

    Returns the VR, or `None` if no usable VR is given,
    together with the cursor behind the VR.
    """
    if cursor.peek() != VR_SEPARATOR:
        return None, cursor
    cursor = cursor.advance()
    if cursor.remaining < VR_LENGTH:
        return None, cursor
    vr, cursor = cursor.take(VR_LENGTH)
    if not is_valid_vr(vr) or is_placeholder_vr(vr):
        report(
            DiagnosticCode.UnrecognizedVR,
            f'Unrecognized DICOM VR "{cursor.text_from(tag_start, MAX_EXCERPT_LEN)}"',
        )
        return None, cursor
    return vr, cursor


def reconcile_vr(
    vr: str | None, dict_vr: str, excerpt: str, report: Reporter
) -> str:
    """Return the VR to use for a tag with the explicit VR `vr` and
    the dictionary VR `dict_vr`. An explicit VR always wins, but a
    mismatch with a known dictionary VR is reported."""
    if vr is None:
        return dict_vr
    if (
        is_valid_vr(dict_vr)
        and dict_vr != UNKNOWN_VR
        and not is_compatible_vr(vr, dict_vr)
    ):
        report(
            DiagnosticCode.VRDictionaryMismatch,
            f'VR of "{excerpt}" doesn\'t match dictionary VR of {dict_vr}',
        )
    return vr


def resolve_vr(
    cursor: LineCursor,
    parsed_tag: ParsedTag,
    tag: BaseTag,
    dictionary: VRDictionary,
    report: Reporter,
) -> tuple[str | None, LineCursor]:
    """Determine the VR for the (resolved) `tag` from the explicit VR
    at `cursor` and the dictionary.

    Returns the VR, or `None` if the tag has no usable VR,
    together with the cursor behind the explicit VR.
    """
    explicit_vr, cursor = parse_explicit_vr(cursor, parsed_tag.start, report)
    vr = reconcile_vr(
        explicit_vr,
        dictionary.dictionary_vr(tag),
        cursor.text_from(parsed_tag.start, MAX_EXCERPT_LEN),
        report,
    )
    # malformed tag text yields the zero tag, which never gets a value
    if parsed_tag.tag == 0 or not is_valid_vr(vr) or vr == UNKNOWN_VR:
        tag_text = cursor.text[parsed_tag.start : parsed_tag.end][:MAX_EXCERPT_LEN]
        report(DiagnosticCode.UnrecognizedTag, f'Unrecognized DICOM tag "{tag_text}"')
        return None, cursor
    return vr, cursor
