from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Optional, Type

from docmeta.logging import get_logger
from docmeta.model.metadata_bag import MetadataBag
from docmeta.model.records import TypedMetadata
from docmeta.steps.metadata.field_mapper import FieldMapper


class BaseMetadataBuilder(ABC):
    """
    Abstract base class for all typed metadata builders.

    Subclasses read their curated field list through a ``FieldMapper`` and
    return the variant-specific attributes; the base fields and the fallback
    map are filled in here from whatever the subclass left unclaimed.
    """

    record_class: ClassVar[Type[TypedMetadata]]
    claims_base_fields: ClassVar[bool] = True

    def __init__(self):
        self.logger = get_logger(self.__class__.__name__)

    def build(self, bag: MetadataBag, parser_id: Optional[str] = None, engine_version: Optional[str] = None) -> TypedMetadata:
        """
        Build the typed metadata variant for a bag.

        Args:
            bag: Metadata produced by the upstream engine
            parser_id: Identifier of the upstream parser
            engine_version: Version string of the upstream engine

        Returns:
            An instance of ``record_class``
        """
        mapper = FieldMapper(bag, self.logger)
        fields = self._map_fields(mapper)
        fields.update(mapper.base_fields(parser_id, engine_version, claim=self.claims_base_fields))
        self.logger.debug(
            f"Mapped {len(mapper.claimed)} typed fields, "
            f"{len(fields['additional_metadata'])} fallback fields"
        )
        return self.record_class(**fields)

    @abstractmethod
    def _map_fields(self, mapper: FieldMapper) -> Dict[str, Any]:
        """
        Read the variant-specific fields.

        Args:
            mapper: Claim-tracking reader bound to the bag being built

        Returns:
            Keyword arguments for ``record_class`` (without the base fields)
        """
        pass
