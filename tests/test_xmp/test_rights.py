"""Tests for XMP rights extraction."""

from unittest.mock import patch

import pytest
from lxml import etree

from docmeta.model.metadata_bag import MetadataBag
from docmeta.xmp.rights import (
    RightsExtractor,
    RightsFields,
    RightsResult,
    TreeWalkStrategy,
    XmpRightsSchema,
    XmpRightsSchemaStrategy,
    apply_rights,
    extract_rights,
    parse_marked,
)

ATTRIBUTE_ONLY_XMP = """<x:xmpmeta xmlns:x="adobe:ns:meta/"
    xmlns:xmpRights="http://ns.adobe.com/xap/1.0/rights/"
    xmpRights:Marked="true">
  <rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#">
    <rdf:Description rdf:about="" xmlns:dc="http://purl.org/dc/elements/1.1/" dc:format="application/pdf"/>
  </rdf:RDF>
</x:xmpmeta>"""

SPLIT_RIGHTS_XMP = """<x:xmpmeta xmlns:x="adobe:ns:meta/">
  <rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"
      xmlns:xmpRights="http://ns.adobe.com/xap/1.0/rights/">
    <rdf:Description rdf:about="" xmpRights:Marked="true"/>
    <rdf:Description rdf:about="">
      <xmpRights:Owner>
        <rdf:Bag><rdf:li>A</rdf:li><rdf:li>B</rdf:li></rdf:Bag>
      </xmpRights:Owner>
      <xmpRights:WebStatement rdf:resource="https://example.org/license"/>
    </rdf:Description>
    <rdf:Description rdf:about="">
      <xmpRights:Owner>
        <rdf:Bag><rdf:li>C</rdf:li></rdf:Bag>
      </xmpRights:Owner>
    </rdf:Description>
  </rdf:RDF>
</x:xmpmeta>"""

NO_RIGHTS_XMP = """<x:xmpmeta xmlns:x="adobe:ns:meta/">
  <rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#">
    <rdf:Description rdf:about=""/>
  </rdf:RDF>
</x:xmpmeta>"""


class TestSchemaStrategy:
    """Test cases for the structured path."""

    def test_reads_all_properties(self, rights_xmp):
        fields = extract_rights(rights_xmp)

        assert fields.certificate == "https://example.org/cert"
        assert fields.marked is True
        assert fields.usage_terms == "CC BY 4.0"
        assert fields.web_statement == "https://example.org/license"
        assert fields.owners == ["A", "B", "C"]

    def test_schema_object(self, rights_xmp):
        root = RightsExtractor().parse_packet(rights_xmp)
        schema = XmpRightsSchema.find(root)

        assert schema is not None
        assert schema.certificate == "https://example.org/cert"
        assert schema.owners == ["A", "B", "C"]

    def test_properties_split_across_descriptions(self):
        fields = extract_rights(SPLIT_RIGHTS_XMP)

        assert fields.marked is True
        assert fields.owners == ["A", "B", "C"]
        assert fields.web_statement == "https://example.org/license"

    def test_schema_spans_every_rights_description(self):
        schema = XmpRightsSchema.find(etree.fromstring(SPLIT_RIGHTS_XMP))

        assert len(schema.descriptions) == 3
        assert schema.marked is True
        assert schema.owners == ["A", "B", "C"]

    def test_no_schema_is_a_failed_result(self):
        root = etree.fromstring(NO_RIGHTS_XMP)

        result = XmpRightsSchemaStrategy().extract(root)

        assert result.success is False
        assert result.error


class TestTreeWalkFallback:
    """Test cases for the raw-tree path."""

    def test_fallback_when_schema_unavailable(self, rights_xmp):
        with patch.object(XmpRightsSchema, "find", return_value=None):
            fields = extract_rights(rights_xmp)

        assert fields.certificate == "https://example.org/cert"
        assert fields.marked is True
        assert fields.usage_terms == "CC BY 4.0"
        assert fields.web_statement == "https://example.org/license"
        assert fields.owners == ["A", "B", "C"]

    def test_fallback_when_schema_raises(self, rights_xmp):
        with patch.object(XmpRightsSchema, "find", side_effect=RuntimeError("broken schema")):
            fields = extract_rights(rights_xmp)

        assert fields.owners == ["A", "B", "C"]
        assert fields.marked is True

    def test_attribute_on_root_element(self):
        fields = extract_rights(ATTRIBUTE_ONLY_XMP)

        assert fields.marked is True
        assert fields.owners == []
        assert fields.certificate is None

    def test_owner_duplicates_and_order_preserved(self):
        packet = """<rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"
            xmlns:xmpRights="http://ns.adobe.com/xap/1.0/rights/">
          <rdf:Description>
            <xmpRights:Owner><rdf:Bag><rdf:li>Z</rdf:li><rdf:li>A</rdf:li><rdf:li>Z</rdf:li></rdf:Bag></xmpRights:Owner>
          </rdf:Description>
        </rdf:RDF>"""
        root = etree.fromstring(packet)

        result = TreeWalkStrategy().extract(root)

        assert result.success is True
        assert result.fields.owners == ["Z", "A", "Z"]

    def test_marked_other_strings_are_false(self):
        root = etree.fromstring(ATTRIBUTE_ONLY_XMP.replace('Marked="true"', 'Marked="maybe"'))

        assert TreeWalkStrategy().extract(root).fields.marked is False


class TestRightsExtractor:
    """Test cases for the strategy chain."""

    def test_first_success_wins(self, rights_xmp):
        class Failing:
            name = "failing"

            def extract(self, root):
                return RightsResult.failed("nope")

        class Fixed:
            name = "fixed"

            def extract(self, root):
                return RightsResult.ok(RightsFields(certificate="fixed"))

        class Unreached:
            name = "unreached"

            def extract(self, root):
                raise AssertionError("should not run")

        fields = RightsExtractor([Failing(), Fixed(), Unreached()]).extract(rights_xmp)

        assert fields.certificate == "fixed"

    def test_all_strategies_fail(self, rights_xmp):
        class Failing:
            name = "failing"

            def extract(self, root):
                return RightsResult.failed("nope")

        assert RightsExtractor([Failing()]).extract(rights_xmp).is_empty()

    @pytest.mark.parametrize("packet", [None, b"", "   ", b"<not xml", "<a><b></a>"])
    def test_missing_or_malformed_packet(self, packet):
        assert extract_rights(packet).is_empty()

    def test_accepts_parsed_tree(self, rights_xmp):
        tree = etree.ElementTree(etree.fromstring(rights_xmp))

        assert extract_rights(tree).owners == ["A", "B", "C"]

    def test_entities_are_not_resolved(self):
        packet = b"""<?xml version="1.0"?>
<!DOCTYPE x [<!ENTITY secret SYSTEM "file:///etc/passwd">]>
<rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"
    xmlns:xmpRights="http://ns.adobe.com/xap/1.0/rights/">
  <rdf:Description><xmpRights:UsageTerms>&secret;</xmpRights:UsageTerms></rdf:Description>
</rdf:RDF>"""

        fields = extract_rights(packet)

        assert fields.usage_terms is None or "root:" not in fields.usage_terms


class TestApplyRights:
    """Test cases for apply_rights."""

    def test_writes_into_new_bag(self):
        bag = MetadataBag({"xmpRights:Owner": "Existing", "dc:title": "T"})
        fields = RightsFields(certificate="c", marked=False, owners=["A", "B"])

        updated = apply_rights(bag, fields)

        assert updated["xmpRights:Certificate"] == ("c",)
        assert updated["xmpRights:Marked"] == ("false",)
        assert updated["xmpRights:Owner"] == ("Existing", "A", "B")
        assert "xmpRights:UsageTerms" not in updated
        assert bag["xmpRights:Owner"] == ("Existing",)

    def test_empty_fields_return_same_bag(self):
        bag = MetadataBag({"a": "1"})

        assert apply_rights(bag, RightsFields()) is bag


@pytest.mark.parametrize("value,expected", [
    ("true", True),
    (" TRUE ", True),
    ("false", False),
    ("yes", False),
    (None, None),
])
def test_parse_marked(value, expected):
    assert parse_marked(value) is expected
