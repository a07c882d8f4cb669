"""
Structured document records.

A ``StructuredDocumentRecord`` carries exactly one primary metadata variant,
selected by ``document_type``, an always-present Dublin Core sub-record and an
optional Creative Commons overlay. Every variant shares the base fields
declared on ``TypedMetadata``; whatever a builder does not map to a typed
attribute is kept in ``additional_metadata`` with all of its values.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

FieldValue = Union[str, List[str]]


class DocumentType(str, Enum):
    """Document types the detector can assign."""

    PDF = "pdf"
    OFFICE = "office"
    IMAGE = "image"
    EMAIL = "email"
    MEDIA = "media"
    HTML = "html"
    RTF = "rtf"
    DATABASE = "database"
    FONT = "font"
    EPUB = "epub"
    WARC = "warc"
    CLIMATE_FORECAST = "climate_forecast"
    CREATIVE_COMMONS = "creative_commons"
    GENERIC = "generic"


class RecordModel(BaseModel):
    model_config = ConfigDict(frozen=True, protected_namespaces=())


class TypedMetadata(RecordModel):
    """Base fields shared by every metadata variant."""

    detected_mime_type: Optional[str] = None
    parser_id: Optional[str] = None
    engine_version: Optional[str] = None
    additional_metadata: Dict[str, FieldValue] = Field(default_factory=dict)
    raw_metadata: Dict[str, FieldValue] = Field(default_factory=dict)
    parse_warnings: List[str] = Field(default_factory=list)


class DublinCoreMetadata(RecordModel):
    title: Optional[str] = None
    creators: List[str] = Field(default_factory=list)
    subjects: List[str] = Field(default_factory=list)
    description: Optional[str] = None
    publisher: Optional[str] = None
    contributors: List[str] = Field(default_factory=list)
    type: Optional[str] = None
    format: Optional[str] = None
    identifier: Optional[str] = None
    source: Optional[str] = None
    language: Optional[str] = None
    relation: Optional[str] = None
    coverage: Optional[str] = None
    rights: Optional[str] = None
    date: Optional[datetime] = None


class DocumentContent(RecordModel):
    body: Optional[str] = None
    content_length: Optional[int] = None


# ---------------------------------------------------------------------------
# PDF
# ---------------------------------------------------------------------------


class PdfMetadata(TypedMetadata):
    document_type: Literal["pdf"] = "pdf"

    # document information dictionary
    doc_info_title: Optional[str] = None
    doc_info_creator: Optional[str] = None
    doc_info_creator_tool: Optional[str] = None
    doc_info_keywords: Optional[str] = None
    doc_info_producer: Optional[str] = None
    doc_info_subject: Optional[str] = None
    doc_info_trapped: Optional[str] = None
    doc_info_created: Optional[datetime] = None
    doc_info_created_raw: Optional[str] = None
    doc_info_modification_date: Optional[datetime] = None
    doc_info_modification_date_raw: Optional[str] = None

    # versions and conformance
    pdf_version: Optional[str] = None
    pdfa_version: Optional[str] = None
    pdf_extension_version: Optional[str] = None
    pdfaid_conformance: Optional[str] = None
    pdfaid_part: Optional[int] = None
    pdfx_version: Optional[str] = None

    # document structure
    page_count: Optional[int] = None
    is_encrypted: Optional[bool] = None
    producer: Optional[str] = None
    xmp_keywords: Optional[str] = None
    has_xfa: Optional[bool] = None
    has_xmp: Optional[bool] = None
    has_acroform_fields: Optional[bool] = None
    has_marked_content: Optional[bool] = None
    has_collection: Optional[bool] = None
    has_3d: Optional[bool] = None
    annotation_types: List[str] = Field(default_factory=list)
    annotation_subtypes: List[str] = Field(default_factory=list)
    incremental_update_count: Optional[int] = None
    eof_offsets: List[float] = Field(default_factory=list)

    # text quality
    characters_per_page: List[int] = Field(default_factory=list)
    unmapped_unicode_chars_per_page: List[int] = Field(default_factory=list)
    total_unmapped_unicode_chars: Optional[int] = None
    overall_percentage_unmapped_unicode_chars: Optional[float] = None
    contains_damaged_font: Optional[bool] = None
    contains_non_embedded_font: Optional[bool] = None
    ocr_page_count: Optional[int] = None

    # access permissions
    can_assemble_document: Optional[bool] = None
    can_extract_content: Optional[bool] = None
    can_extract_for_accessibility: Optional[bool] = None
    can_fill_in_form: Optional[bool] = None
    can_modify_annotations: Optional[bool] = None
    can_modify_document: Optional[bool] = None
    can_print: Optional[bool] = None
    can_print_faithful: Optional[bool] = None

    # signatures and parsing
    has_signature: Optional[bool] = None
    signature_names: List[str] = Field(default_factory=list)
    signature_reasons: List[str] = Field(default_factory=list)
    xmp_parse_failed: List[str] = Field(default_factory=list)
    detected_encoding: Optional[str] = None


# ---------------------------------------------------------------------------
# Office
# ---------------------------------------------------------------------------


class OfficeMetadata(TypedMetadata):
    document_type: Literal["office"] = "office"

    keywords: List[str] = Field(default_factory=list)
    initial_author: Optional[str] = None
    last_author: Optional[str] = None
    authors: List[str] = Field(default_factory=list)
    creation_date: Optional[datetime] = None
    creation_date_raw: Optional[str] = None
    save_date: Optional[datetime] = None
    save_date_raw: Optional[str] = None
    print_date: Optional[datetime] = None
    print_date_raw: Optional[str] = None

    slide_count: Optional[int] = None
    page_count: Optional[int] = None
    paragraph_count: Optional[int] = None
    line_count: Optional[int] = None
    word_count: Optional[int] = None
    character_count: Optional[int] = None
    character_count_with_spaces: Optional[int] = None
    table_count: Optional[int] = None
    image_count: Optional[int] = None
    object_count: Optional[int] = None

    has_hidden_sheets: Optional[bool] = None
    hidden_sheet_names: List[str] = Field(default_factory=list)
    protected_worksheet: Optional[bool] = None
    has_comments: Optional[bool] = None
    comment_persons: List[str] = Field(default_factory=list)
    has_hidden_slides: Optional[bool] = None
    has_hidden_text: Optional[bool] = None
    has_track_changes: Optional[bool] = None

    category: Optional[str] = None
    content_status: Optional[str] = None
    last_modified_by: Optional[str] = None
    last_printed: Optional[datetime] = None
    last_printed_raw: Optional[str] = None
    revision: Optional[str] = None
    version: Optional[str] = None

    template: Optional[str] = None
    managers: List[str] = Field(default_factory=list)
    company: Optional[str] = None
    presentation_format: Optional[str] = None
    notes: Optional[int] = None
    total_time_raw: Optional[str] = None
    total_time_seconds: Optional[int] = None
    hidden_slides: Optional[int] = None
    application: Optional[str] = None
    app_version: Optional[str] = None
    doc_security: Optional[int] = None
    doc_security_string: Optional[str] = None


# ---------------------------------------------------------------------------
# Image
# ---------------------------------------------------------------------------


class ExifData(RecordModel):
    make: Optional[str] = None
    model: Optional[str] = None
    software: Optional[str] = None
    exposure_time: Optional[float] = None
    f_number: Optional[float] = None
    focal_length: Optional[float] = None
    flash_fired: Optional[str] = None
    iso_speed_ratings: List[int] = Field(default_factory=list)
    original_date: Optional[datetime] = None


class IptcData(RecordModel):
    headline: Optional[str] = None
    credit_line: Optional[str] = None
    category: Optional[str] = None
    copyright_notice: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    keywords: List[str] = Field(default_factory=list)


class GpsData(RecordModel):
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    altitude: Optional[float] = None
    timestamp: Optional[datetime] = None


class ImageMetadata(TypedMetadata):
    document_type: Literal["image"] = "image"

    width: Optional[int] = None
    height: Optional[int] = None
    bits_per_sample: List[int] = Field(default_factory=list)
    samples_per_pixel: Optional[int] = None
    orientation: Optional[int] = None
    resolution_horizontal: Optional[float] = None
    resolution_vertical: Optional[float] = None
    resolution_unit: Optional[str] = None
    modified: Optional[datetime] = None
    comments: Optional[str] = None
    exif: Optional[ExifData] = None
    iptc: Optional[IptcData] = None
    gps: Optional[GpsData] = None


# ---------------------------------------------------------------------------
# Email
# ---------------------------------------------------------------------------


class EmailMetadata(TypedMetadata):
    document_type: Literal["email"] = "email"

    title: Optional[str] = None
    creator: Optional[str] = None
    description: Optional[str] = None
    created: Optional[datetime] = None
    modified: Optional[datetime] = None

    message_from: Optional[str] = None
    message_to: Optional[str] = None
    message_cc: Optional[str] = None
    message_bcc: Optional[str] = None
    from_names: List[str] = Field(default_factory=list)
    from_emails: List[str] = Field(default_factory=list)
    to_names: List[str] = Field(default_factory=list)
    to_emails: List[str] = Field(default_factory=list)
    cc_names: List[str] = Field(default_factory=list)
    cc_emails: List[str] = Field(default_factory=list)
    bcc_names: List[str] = Field(default_factory=list)
    bcc_emails: List[str] = Field(default_factory=list)
    multipart_subtype: Optional[str] = None
    multipart_boundary: Optional[str] = None

    message_class: Optional[str] = None
    internet_message_id: Optional[str] = None
    in_reply_to_id: Optional[str] = None
    internet_references: List[str] = Field(default_factory=list)
    conversation_topic: Optional[str] = None
    submission_id: Optional[str] = None
    importance: Optional[int] = None
    priority: Optional[int] = None
    is_flagged: Optional[bool] = None

    has_signature: Optional[bool] = None
    is_encrypted: Optional[bool] = None
    signature_dates: List[datetime] = Field(default_factory=list)
    detected_encoding: Optional[str] = None


# ---------------------------------------------------------------------------
# Media
# ---------------------------------------------------------------------------


class MediaMetadata(TypedMetadata):
    document_type: Literal["media"] = "media"

    title: Optional[str] = None
    creator: Optional[str] = None
    created: Optional[datetime] = None
    modified: Optional[datetime] = None

    duration: Optional[float] = None
    channels: Optional[int] = None
    sample_rate: Optional[int] = None
    bitrate: Optional[int] = None
    bits_per_sample: Optional[int] = None
    audio_channel_type: Optional[str] = None
    audio_compressor: Optional[str] = None
    audio_sample_type: Optional[str] = None

    album: Optional[str] = None
    album_artist: Optional[str] = None
    artist: Optional[str] = None
    composer: Optional[str] = None
    genre: Optional[str] = None
    track_number: Optional[int] = None
    disc_number: Optional[int] = None
    release_date: Optional[datetime] = None
    copyright: Optional[str] = None
    tempo: Optional[float] = None
    loop: Optional[bool] = None

    video_frame_rate: Optional[str] = None
    video_compressor: Optional[str] = None
    video_color_space: Optional[str] = None
    codec: Optional[str] = None
    major_brand: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None

    latitude: Optional[float] = None
    longitude: Optional[float] = None
    altitude: Optional[float] = None


# ---------------------------------------------------------------------------
# HTML
# ---------------------------------------------------------------------------


class OpenGraphData(RecordModel):
    title: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    url: Optional[str] = None
    image: Optional[str] = None
    site_name: Optional[str] = None


class TwitterCardData(RecordModel):
    card: Optional[str] = None
    site: Optional[str] = None
    creator: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None


class HtmlMetadata(TypedMetadata):
    document_type: Literal["html"] = "html"

    title: Optional[str] = None
    description: Optional[str] = None
    keywords: Optional[str] = None
    author: Optional[str] = None
    generator: Optional[str] = None
    robots: Optional[str] = None
    viewport: Optional[str] = None
    charset: Optional[str] = None
    refresh: Optional[str] = None

    canonical_url: Optional[str] = None
    icon: Optional[str] = None
    stylesheet: Optional[str] = None
    alternate: Optional[str] = None
    rss_feed: Optional[str] = None
    atom_feed: Optional[str] = None
    script_source: Optional[str] = None
    data_uris: List[str] = Field(default_factory=list)

    content_encoding: Optional[str] = None
    content_language: Optional[str] = None
    content_location: Optional[str] = None
    detected_encoding: Optional[str] = None

    open_graph: Optional[OpenGraphData] = None
    twitter_card: Optional[TwitterCardData] = None
    meta_dublin_core: Dict[str, str] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# RTF, database, font, EPUB
# ---------------------------------------------------------------------------


class RtfMetadata(TypedMetadata):
    document_type: Literal["rtf"] = "rtf"

    emb_app_version: Optional[str] = None
    emb_class: Optional[str] = None
    emb_topic: Optional[str] = None
    emb_item: Optional[str] = None
    contains_encapsulated_html: Optional[bool] = None
    thumbnail: Optional[bool] = None
    picture_metadata: Dict[str, str] = Field(default_factory=dict)

    page_count: Optional[int] = None
    word_count: Optional[int] = None
    character_count: Optional[int] = None
    category: Optional[str] = None
    company: Optional[str] = None
    template: Optional[str] = None
    print_date: Optional[datetime] = None
    is_encrypted: Optional[bool] = None
    content_encoding: Optional[str] = None


class DatabaseMetadata(TypedMetadata):
    document_type: Literal["database"] = "database"

    table_names: List[str] = Field(default_factory=list)
    column_names: List[str] = Field(default_factory=list)
    column_count: Optional[int] = None
    row_count: Optional[int] = None
    title: Optional[str] = None
    creator: Optional[str] = None
    description: Optional[str] = None
    created: Optional[datetime] = None
    modified: Optional[datetime] = None
    content_length: Optional[int] = None


class FontMetadata(TypedMetadata):
    document_type: Literal["font"] = "font"

    font_name: Optional[str] = None
    font_names: List[str] = Field(default_factory=list)
    family_name: Optional[str] = None
    full_name: Optional[str] = None
    sub_family_name: Optional[str] = None
    version: Optional[str] = None
    original_filename: Optional[str] = None


class EpubMetadata(TypedMetadata):
    document_type: Literal["epub"] = "epub"

    rendition_layout: Optional[str] = None
    version: Optional[str] = None
    content_language: Optional[str] = None
    unique_identifier: Optional[str] = None


# ---------------------------------------------------------------------------
# WARC
# ---------------------------------------------------------------------------


class WarcHttpHeader(RecordModel):
    name: str
    value: str


class WarcMetadata(TypedMetadata):
    document_type: Literal["warc"] = "warc"

    warc_type: Optional[str] = None
    record_id: Optional[str] = None
    target_uri: Optional[str] = None
    warc_date: Optional[datetime] = None
    content_length: Optional[int] = None
    record_content_type: Optional[str] = None
    payload_content_type: Optional[str] = None
    identified_payload_type: Optional[str] = None
    filename: Optional[str] = None
    refers_to: Optional[str] = None
    concurrent_to: Optional[str] = None
    warcinfo_id: Optional[str] = None
    ip_address: Optional[str] = None
    block_digest: Optional[str] = None
    payload_digest: Optional[str] = None
    truncated: Optional[str] = None
    warnings: List[str] = Field(default_factory=list)

    http_status_code: Optional[int] = None
    http_status_reason: Optional[str] = None
    http_headers: List[WarcHttpHeader] = Field(default_factory=list)

    content_language: Optional[str] = None
    content_encoding: Optional[str] = None
    created_by: Optional[str] = None
    format_version: Optional[str] = None
    collection: Optional[str] = None
    crawl_id: Optional[str] = None
    robot_policy: Optional[str] = None


# ---------------------------------------------------------------------------
# Climate forecast, Creative Commons, generic
# ---------------------------------------------------------------------------


class ClimateForecastMetadata(TypedMetadata):
    document_type: Literal["climate_forecast"] = "climate_forecast"

    conventions: Optional[str] = None
    institution: Optional[str] = None
    source: Optional[str] = None
    history: Optional[str] = None
    references: Optional[str] = None
    comment: Optional[str] = None
    contact: Optional[str] = None
    project_id: Optional[str] = None
    experiment_id: Optional[str] = None
    realization: Optional[str] = None
    table_id: Optional[str] = None
    model_name_english: Optional[str] = None
    program_id: Optional[str] = None
    command_line: Optional[str] = None
    acknowledgement: Optional[str] = None


class CreativeCommonsMetadata(TypedMetadata):
    """Rights metadata; used both as a primary variant and as the overlay."""

    document_type: Literal["creative_commons"] = "creative_commons"

    rights_certificate: Optional[str] = None
    rights_marked: Optional[bool] = None
    usage_terms: Optional[str] = None
    web_statement: Optional[str] = None
    rights_owners: List[str] = Field(default_factory=list)


class GenericMetadata(TypedMetadata):
    document_type: Literal["generic"] = "generic"

    file_extension: Optional[str] = None


DocumentMetadata = Annotated[
    Union[
        PdfMetadata,
        OfficeMetadata,
        ImageMetadata,
        EmailMetadata,
        MediaMetadata,
        HtmlMetadata,
        RtfMetadata,
        DatabaseMetadata,
        FontMetadata,
        EpubMetadata,
        WarcMetadata,
        ClimateForecastMetadata,
        CreativeCommonsMetadata,
        GenericMetadata,
    ],
    Field(discriminator="document_type"),
]


class StructuredDocumentRecord(RecordModel):
    """One extraction result: primary variant + Dublin Core + optional rights overlay."""

    doc_id: Optional[str] = None
    content: DocumentContent = Field(default_factory=DocumentContent)
    dublin_core: DublinCoreMetadata = Field(default_factory=DublinCoreMetadata)
    metadata: DocumentMetadata
    creative_commons: Optional[CreativeCommonsMetadata] = None

    @property
    def document_type(self) -> DocumentType:
        return DocumentType(self.metadata.document_type)
