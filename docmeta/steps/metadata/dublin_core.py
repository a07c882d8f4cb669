from typing import List, Optional

from docmeta.logging import get_logger
from docmeta.model.metadata_bag import MetadataBag
from docmeta.model.records import DublinCoreMetadata
from docmeta.steps.metadata import properties as P


class DublinCoreMapper:
    """Maps the 15 Dublin Core elements; shared by every document type."""

    def __init__(self):
        self.logger = get_logger(self.__class__.__name__)

    def map(self, bag: MetadataBag) -> DublinCoreMetadata:
        """
        Extract Dublin Core elements from a bag.

        Creator, subject and contributor keep every non-blank value. The date is
        parsed leniently and omitted when it cannot be read.

        Args:
            bag: Metadata produced by the upstream engine

        Returns:
            DublinCoreMetadata; equal for equal bags
        """
        if not isinstance(bag, MetadataBag):
            raise TypeError(f"expected MetadataBag, got {type(bag).__name__}")

        raw_date = _first(bag, P.DC_DATE)
        date = bag.get_date(P.DC_DATE)
        if raw_date is not None and date is None:
            self.logger.warning(f"Ignoring malformed {P.DC_DATE}: {raw_date!r}")

        return DublinCoreMetadata(
            title=_first(bag, P.DC_TITLE),
            creators=_all(bag, P.DC_CREATOR),
            subjects=_all(bag, P.DC_SUBJECT),
            description=_first(bag, P.DC_DESCRIPTION),
            publisher=_first(bag, P.DC_PUBLISHER),
            contributors=_all(bag, P.DC_CONTRIBUTOR),
            type=_first(bag, P.DC_TYPE),
            format=_first(bag, P.DC_FORMAT),
            identifier=_first(bag, P.DC_IDENTIFIER),
            source=_first(bag, P.DC_SOURCE),
            language=_first(bag, P.DC_LANGUAGE),
            relation=_first(bag, P.DC_RELATION),
            coverage=_first(bag, P.DC_COVERAGE),
            rights=_first(bag, P.DC_RIGHTS),
            date=date,
        )


def _first(bag: MetadataBag, name: str) -> Optional[str]:
    value = bag.get_first(name)
    if value is None:
        return None
    return value.strip() or None


def _all(bag: MetadataBag, name: str) -> List[str]:
    return [value.strip() for value in bag.get_values(name) if value.strip()]
