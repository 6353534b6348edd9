"""
Value representation (VR) sets used to validate and reconcile the VRs
given in query files against the DICOM dictionary.
"""

from pydicom.valuerep import VR

# the VRs that denote a family of concrete VRs, as used in the dictionary,
# e.g. "OB or OW" for pixel data or "US or SS" for values depending on
# the pixel representation
AMBIGUOUS_VRS = frozenset(vr.value for vr in VR if " or " in vr.value)
STANDARD_VRS = frozenset(vr.value for vr in VR if " or " not in vr.value)

# two-letter codes for the most common ambiguous VRs
AMBIGUOUS_VR_CODES = {
    "OX": "OB or OW",
    "XS": "US or SS",
}

UNKNOWN_VR = "UN"

INTEGER_VRS = frozenset(("SL", "SS", "SV", "UL", "US", "UV", "US or SS"))
FLOAT_VRS = frozenset(("FD", "FL"))
BINARY_VRS = frozenset(("OB", "OD", "OF", "OL", "OV", "OW", "UN")) | AMBIGUOUS_VRS


def is_valid_vr(vr: str | None) -> bool:
    """Return `True` if `vr` is a standard or an ambiguous dictionary VR."""
    return vr in STANDARD_VRS or vr in AMBIGUOUS_VRS


def is_placeholder_vr(vr: str) -> bool:
    """Return `True` for VRs that cannot be used as the VR of a query value."""
    return vr == UNKNOWN_VR or vr in AMBIGUOUS_VRS or vr in AMBIGUOUS_VR_CODES


def vr_family(vr: str) -> tuple[str, ...]:
    """Return the concrete VRs denoted by `vr`.

    A concrete VR is its own family, e.g. ``vr_family("US or SS")``
    returns ``("US", "SS")`` while ``vr_family("CS")`` returns ``("CS",)``.
    """
    return tuple(AMBIGUOUS_VR_CODES.get(vr, vr).split(" or "))


def is_compatible_vr(vr: str, dict_vr: str) -> bool:
    """Return `True` if the explicit `vr` may be used for a tag
    with the dictionary VR `dict_vr`."""
    return vr == dict_vr or (dict_vr in AMBIGUOUS_VRS and vr in vr_family(dict_vr))
