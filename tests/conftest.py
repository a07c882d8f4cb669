"""Pytest configuration and fixtures for docmeta tests."""

import os
import tempfile

os.environ.setdefault("DOCMETA_LOG_DIR", tempfile.mkdtemp(prefix="docmeta-logs-"))

import pytest  # noqa: E402

from docmeta.model.metadata_bag import MetadataBag  # noqa: E402
from docmeta.steps.metadata.dispatcher import ExtractionDispatcher  # noqa: E402


RIGHTS_XMP = b"""<?xpacket begin="" id="W5M0MpCehiHzreSzNTczkc9d"?>
<x:xmpmeta xmlns:x="adobe:ns:meta/">
  <rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#">
    <rdf:Description rdf:about=""
        xmlns:xmpRights="http://ns.adobe.com/xap/1.0/rights/"
        xmpRights:Marked="True"
        xmpRights:WebStatement="https://example.org/license">
      <xmpRights:Certificate>https://example.org/cert</xmpRights:Certificate>
      <xmpRights:UsageTerms>
        <rdf:Alt>
          <rdf:li xml:lang="x-default">CC BY 4.0</rdf:li>
        </rdf:Alt>
      </xmpRights:UsageTerms>
      <xmpRights:Owner>
        <rdf:Bag>
          <rdf:li>A</rdf:li>
          <rdf:li> B </rdf:li>
          <rdf:li></rdf:li>
          <rdf:li>C</rdf:li>
        </rdf:Bag>
      </xmpRights:Owner>
    </rdf:Description>
  </rdf:RDF>
</x:xmpmeta>
<?xpacket end="w"?>"""


@pytest.fixture
def rights_xmp() -> bytes:
    """XMP packet carrying every xmpRights property, three owners."""
    return RIGHTS_XMP


@pytest.fixture
def pdf_bag() -> MetadataBag:
    """Typical upstream output for a PDF."""
    return MetadataBag({
        "Content-Type": "application/pdf",
        "Content-Length": "12345",
        "X-TIKA:Parsed-By": ["org.apache.tika.parser.DefaultParser", "org.apache.tika.parser.pdf.PDFParser"],
        "dc:title": "Report",
        "dc:creator": ["Alice", "Bob"],
        "xmpTPg:NPages": "12",
        "pdf:PDFVersion": "1.7",
        "pdf:encrypted": "false",
        "pdf:docinfo:created": "2021-03-04T05:06:07Z",
        "pdf:docinfo:modified": "last tuesday",
        "pdf:charsPerPage": ["100", "200"],
        "access_permission:can_print": "true",
        "custom:tag": ["x", "y", "z"],
    })


@pytest.fixture
def generic_bag() -> MetadataBag:
    """No MIME type, no known parser, no recognisable name."""
    return MetadataBag({
        "X-TIKA:Parsed-By": "org.apache.tika.parser.EmptyParser",
        "resourceName": "notes.xyz",
        "custom:one": "1",
        "custom:many": ["a", "b", "c"],
    })


@pytest.fixture
def dispatcher() -> ExtractionDispatcher:
    return ExtractionDispatcher()
