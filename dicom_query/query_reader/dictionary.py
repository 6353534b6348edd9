"""
Dictionary access used while reading query files. The query reader only
depends on the protocols defined here, the default implementation
uses the `pydicom` data dictionaries.
"""

from abc import abstractmethod
from typing import Protocol

from pydicom import Dataset
from pydicom.datadict import dictionary_VR, private_dictionary_VR
from pydicom.tag import BaseTag, Tag


class VRDictionary(Protocol):
    """Protocol for the lookup of the dictionary VR of a tag."""

    @abstractmethod
    def dictionary_vr(self, tag: BaseTag) -> str:
        """Return the VR of `tag` as listed in the dictionary,
        or an empty string for unknown tags."""
        ...


class PrivateTagResolver(Protocol):
    """Protocol for mapping a private tag to the block of its creator."""

    @abstractmethod
    def resolve_private_tag(self, creator: str, tag: BaseTag) -> BaseTag:
        """Return the tag ID to be used for `tag` with the private `creator`."""
        ...


def is_private_group(group: int) -> bool:
    """Return `True` if `group` may hold private creator blocks."""
    return group % 2 == 1 and 0x0008 < group < 0xFFFF


class DicomDictionary(VRDictionary, PrivateTagResolver):
    """Dictionary lookup and private tag resolution using `pydicom`.

    Private blocks are reserved in `dataset`, which therefore holds
    a private creator element for each resolved private creator.
    """

    def __init__(self, dataset: Dataset | None = None) -> None:
        self.dataset = Dataset() if dataset is None else dataset

    def resolve_private_tag(self, creator: str, tag: BaseTag) -> BaseTag:
        """Reserve the private block for `creator` in the tag group and
        return the tag inside this block. The same creator always gets the
        same block, new creators get the next free block.
        Tags that cannot be private are returned unchanged.
        """
        if not creator or not is_private_group(tag.group):
            return tag
        block = self.dataset.private_block(tag.group, creator, create=True)
        return BaseTag(block.get_tag(tag.element & 0xFF))

    def dictionary_vr(self, tag: BaseTag) -> str:
        # command group elements are not part of a data set
        if tag.group == 0:
            return ""
        if tag.is_private:
            creator = self.private_creator(tag)
            if creator:
                try:
                    return private_dictionary_VR(tag, creator)
                except KeyError:
                    return ""
        try:
            return dictionary_VR(tag)
        except KeyError:
            return ""

    def private_creator(self, tag: BaseTag) -> str:
        """Return the private creator reserved for the block of `tag`,
        or an empty string if there is none."""
        if tag.element < 0x1000:
            return ""
        creator_tag = Tag(tag.group, tag.element >> 8)
        if creator_tag not in self.dataset:
            return ""
        return str(self.dataset[creator_tag].value)
