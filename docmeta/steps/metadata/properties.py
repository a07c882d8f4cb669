"""
Field names produced by the upstream content-extraction engine.

These are treated as a fixed input vocabulary. Renaming any of them upstream
means updating the claimed-field lists of the builders that read them.
"""

# core
CONTENT_TYPE = "Content-Type"
CONTENT_LENGTH = "Content-Length"
CONTENT_ENCODING = "Content-Encoding"
CONTENT_LANGUAGE = "Content-Language"
CONTENT_LOCATION = "Content-Location"
RESOURCE_NAME = "resourceName"
PARSED_BY = "X-TIKA:Parsed-By"
PARSING_WARNING = "tika:parsing-warning"
DETECTED_ENCODING = "X-TIKA:detectedEncoding"
ENCRYPTED = "X-TIKA:encrypted"
ORIGINAL_FILENAME = "X-TIKA:origResourceName"

# dublin core
DC_TITLE = "dc:title"
DC_CREATOR = "dc:creator"
DC_SUBJECT = "dc:subject"
DC_DESCRIPTION = "dc:description"
DC_PUBLISHER = "dc:publisher"
DC_CONTRIBUTOR = "dc:contributor"
DC_DATE = "dc:date"
DC_TYPE = "dc:type"
DC_FORMAT = "dc:format"
DC_IDENTIFIER = "dc:identifier"
DC_SOURCE = "dc:source"
DC_LANGUAGE = "dc:language"
DC_RELATION = "dc:relation"
DC_COVERAGE = "dc:coverage"
DC_RIGHTS = "dc:rights"
DC_CREATED = "dcterms:created"
DC_MODIFIED = "dcterms:modified"

# xmp rights
XMP_RIGHTS_PREFIX = "xmpRights:"
XMP_RIGHTS_CERTIFICATE = "xmpRights:Certificate"
XMP_RIGHTS_MARKED = "xmpRights:Marked"
XMP_RIGHTS_OWNER = "xmpRights:Owner"
XMP_RIGHTS_USAGE_TERMS = "xmpRights:UsageTerms"
XMP_RIGHTS_WEB_STATEMENT = "xmpRights:WebStatement"

# lower-cased substrings of field names that signal rights metadata
RIGHTS_MARKERS = ("xmprights", "xmp-rights", ":rights", "xmp.rights")

# lower-cased substrings of field names that may carry a Creative Commons license
LICENSE_FIELD_MARKERS = ("license", "creative", "cc:", "rights")

# xmp / misc
XMP_CREATOR_TOOL = "xmp:CreatorTool"
XMP_METADATA_DATE = "xmp:MetadataDate"
XMP_TPG_NPAGES = "xmpTPg:NPages"
COMMENTS = "w:Comments"

# pdf
PDF_DOCINFO_PREFIX = "pdf:docinfo:"
PDF_VERSION = "pdf:PDFVersion"
PDFA_VERSION = "pdfa:PDFVersion"
PDF_EXTENSION_VERSION = "pdf:PDFExtensionVersion"
PDFAID_CONFORMANCE = "pdfaid:conformance"
PDFAID_PART = "pdfaid:part"
PDFX_VERSION = "pdfx:version"
PDF_ENCRYPTED = "pdf:encrypted"
PDF_PRODUCER = "pdf:producer"
PDF_KEYWORDS = "pdf:Keywords"
PDF_HAS_XFA = "pdf:hasXFA"
PDF_HAS_XMP = "pdf:hasXMP"
PDF_HAS_ACROFORM_FIELDS = "pdf:hasAcroFormFields"
PDF_HAS_MARKED_CONTENT = "pdf:hasMarkedContent"
PDF_HAS_COLLECTION = "pdf:hasCollection"
PDF_HAS_3D = "pdf:has3D"
PDF_ANNOTATION_TYPES = "pdf:annotationTypes"
PDF_ANNOTATION_SUBTYPES = "pdf:annotationSubtypes"
PDF_INCREMENTAL_UPDATE_COUNT = "pdf:incrementalUpdateCount"
PDF_EOF_OFFSETS = "pdf:eofOffsets"
PDF_CHARS_PER_PAGE = "pdf:charsPerPage"
PDF_UNMAPPED_PER_PAGE = "pdf:unmappedUnicodeCharsPerPage"
PDF_TOTAL_UNMAPPED = "pdf:totalUnmappedUnicodeChars"
PDF_PERCENT_UNMAPPED = "pdf:overallPercentageUnmappedUnicodeChars"
PDF_DAMAGED_FONT = "pdf:containsDamagedFont"
PDF_NON_EMBEDDED_FONT = "pdf:containsNonEmbeddedFont"
PDF_OCR_PAGE_COUNT = "pdf:ocrPageCount"
PDF_HAS_SIGNATURE = "hasSignature"
PDF_SIGNATURE_NAME = "pdf:signature:name"
PDF_SIGNATURE_REASON = "pdf:signature:reason"
XMP_PARSE_FAILED = "pdf:xmpParseFailed"
ACCESS_PERMISSION_PREFIX = "access_permission:"

# office
META_PREFIX = "meta:"
CP_PREFIX = "cp:"
EXTENDED_PREFIX = "extended-properties:"
OFFICE_HIDDEN_SHEETS = "msoffice:excel:hasHiddenSheets"
OFFICE_HIDDEN_SHEET_NAMES = "msoffice:excel:hiddenSheetNames"
OFFICE_PROTECTED_WORKSHEET = "msoffice:excel:protectedWorksheet"
OFFICE_HAS_COMMENTS = "msoffice:hasComments"
OFFICE_COMMENT_PERSONS = "msoffice:comment-person-display-name"
OFFICE_HIDDEN_SLIDES = "msoffice:ppt:hasHiddenSlides"
OFFICE_HIDDEN_TEXT = "msoffice:doc:hasHiddenText"
OFFICE_TRACK_CHANGES = "msoffice:doc:hasTrackChanges"

# email
MESSAGE_FROM = "Message-From"
MESSAGE_TO = "Message-To"
MESSAGE_CC = "Message-Cc"
MESSAGE_BCC = "Message-Bcc"
MESSAGE_PREFIX = "Message:"
MULTIPART_SUBTYPE = "Multipart-Subtype"
MULTIPART_BOUNDARY = "Multipart-Boundary"
MAPI_PREFIX = "mapi:"
SIGNATURE_DATE = "signature:date"
HAS_SIGNATURE = "X-TIKA:has_signature"

# media
XMP_DM_PREFIX = "xmpDM:"
AUDIO_PREFIX = "audio:"
CHANNELS = "channels"
SAMPLE_RATE = "samplerate"
BITRATE = "bitrate"

# image
TIFF_PREFIX = "tiff:"
EXIF_PREFIX = "exif:"
PHOTOSHOP_PREFIX = "photoshop:"
IPTC_PREFIX = "Iptc4xmpCore:"
GEO_LAT = "geo:lat"
GEO_LONG = "geo:long"
GEO_ALT = "geo:alt"
GPS_TIMESTAMP = "exif:GPSTimeStamp"

# html
HTML_META_PREFIX = "html:meta:"
HTML_OG_PREFIX = "html:meta:og:"
HTML_TWITTER_PREFIX = "html:meta:twitter:"
HTML_DC_PREFIX = "html:meta:dc:"
HTML_LINK_PREFIX = "html:link:"
HTML_SCRIPT_SRC = "html:script:src"
HTML_DATA_URI = "html:data-uri"
HTML_TITLE = "html:title"
ICBM = "ICBM"

# rtf
RTF_META_PREFIX = "rtf_meta:"
RTF_PICT_PREFIX = "rtf_pict:"

# database
DATABASE_TABLE_NAME = "database:table_name"
DATABASE_COLUMN_NAME = "database:column_name"
DATABASE_COLUMN_COUNT = "database:column_count"
DATABASE_ROW_COUNT = "database:row_count"

# font
FONT_NAME = "font:name"
FONT_FAMILY_NAME = "font:familyName"
FONT_FULL_NAME = "font:fullName"
FONT_SUB_FAMILY_NAME = "font:subFamilyName"
FONT_VERSION = "font:version"

# epub
EPUB_VERSION = "epub:version"
EPUB_RENDITION_LAYOUT = "epub:rendition:layout"

# warc
WARC_PREFIX = "warc:WARC-"
WARC_HTTP_PREFIX = "warc:http:"
WARC_HTTP_STATUS = "warc:http:status"
WARC_HTTP_STATUS_REASON = "warc:http:status:reason"
WARC_WARNING = "warc:warning"
WARC_RECORD_CONTENT_TYPE = "warc:record-content-type"
WARC_PAYLOAD_CONTENT_TYPE = "warc:payload-content-type"

# climate forecast
CF_CONVENTIONS = "Conventions"
