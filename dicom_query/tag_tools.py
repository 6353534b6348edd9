from pydicom.datadict import dictionary_description
from pydicom.tag import BaseTag


def tag_id_string(tag_id: BaseTag) -> str:
    """Return the tag ID in the form '(gggg,eeee)'."""
    return f"({tag_id.group:04X},{tag_id.element:04X})"


def tag_name_from_id(tag_id: BaseTag) -> str:
    """Return a human-readable tag string for a `pydicom` tag.

    Parameters
    ----------
    tag_id : BaseTag
        `pydicom.tag.BaseTag` instance.

    Returns
    -------
    str
        The tag ID with its dictionary name in parentheses when known.
    """
    tag_str = tag_id_string(tag_id)
    # command group elements are never part of a query
    if tag_id.group == 0 or tag_id.is_private:
        return tag_str
    try:
        return f"{tag_str} ({dictionary_description(tag_id)})"
    except KeyError:
        return tag_str
