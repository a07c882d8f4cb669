from types import MappingProxyType

from docmeta.model.records import DocumentType
from docmeta.steps.metadata.builders.base_builder import BaseMetadataBuilder
from docmeta.steps.metadata.builders.climate_builder import ClimateForecastMetadataBuilder
from docmeta.steps.metadata.builders.creative_commons_builder import CreativeCommonsMetadataBuilder
from docmeta.steps.metadata.builders.database_builder import DatabaseMetadataBuilder
from docmeta.steps.metadata.builders.email_builder import EmailMetadataBuilder
from docmeta.steps.metadata.builders.epub_builder import EpubMetadataBuilder
from docmeta.steps.metadata.builders.font_builder import FontMetadataBuilder
from docmeta.steps.metadata.builders.generic_builder import GenericMetadataBuilder
from docmeta.steps.metadata.builders.html_builder import HtmlMetadataBuilder
from docmeta.steps.metadata.builders.image_builder import ImageMetadataBuilder
from docmeta.steps.metadata.builders.media_builder import MediaMetadataBuilder
from docmeta.steps.metadata.builders.office_builder import OfficeMetadataBuilder
from docmeta.steps.metadata.builders.pdf_builder import PdfMetadataBuilder
from docmeta.steps.metadata.builders.rtf_builder import RtfMetadataBuilder
from docmeta.steps.metadata.builders.warc_builder import WarcMetadataBuilder

# one stateless builder per document type, shared by every extraction
BUILDERS = MappingProxyType({
    DocumentType.PDF: PdfMetadataBuilder(),
    DocumentType.OFFICE: OfficeMetadataBuilder(),
    DocumentType.IMAGE: ImageMetadataBuilder(),
    DocumentType.EMAIL: EmailMetadataBuilder(),
    DocumentType.MEDIA: MediaMetadataBuilder(),
    DocumentType.HTML: HtmlMetadataBuilder(),
    DocumentType.RTF: RtfMetadataBuilder(),
    DocumentType.DATABASE: DatabaseMetadataBuilder(),
    DocumentType.FONT: FontMetadataBuilder(),
    DocumentType.EPUB: EpubMetadataBuilder(),
    DocumentType.WARC: WarcMetadataBuilder(),
    DocumentType.CLIMATE_FORECAST: ClimateForecastMetadataBuilder(),
    DocumentType.CREATIVE_COMMONS: CreativeCommonsMetadataBuilder(),
    DocumentType.GENERIC: GenericMetadataBuilder(),
})

__all__ = ["BUILDERS", "BaseMetadataBuilder"]
