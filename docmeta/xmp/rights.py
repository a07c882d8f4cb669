"""
XMP Rights Management extraction.

Two strategies are tried in order and the first success wins:

1. ``XmpRightsSchemaStrategy`` reads the properties through an
   ``XmpRightsSchema`` object over the ``rdf:Description`` elements that carry the
   ``xmpRights`` namespace.
2. ``TreeWalkStrategy`` walks the raw XML tree: namespaced attribute on the
   root, then the first namespaced descendant element, then the attribute on
   any ``rdf:Description``. Owners come from every ``rdf:Bag/rdf:li``.

Both read with lxml; packets are parsed with entity resolution and network
access disabled.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, TypeVar, Union

from lxml import etree

from docmeta.common.dates import parse_marked
from docmeta.logging import get_logger
from docmeta.model.metadata_bag import MetadataBag
from docmeta.steps.metadata import properties as P

XMP_RIGHTS_NS = "http://ns.adobe.com/xap/1.0/rights/"
RDF_NS = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"

_SECURE_XML_PARSER = etree.XMLParser(resolve_entities=False, no_network=True)

logger = get_logger(__name__)

T = TypeVar("T")
XmpPacket = Union[bytes, str, etree._Element, etree._ElementTree]


def _rights(local_name: str) -> str:
    return f"{{{XMP_RIGHTS_NS}}}{local_name}"


def _rdf(local_name: str) -> str:
    return f"{{{RDF_NS}}}{local_name}"


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or None


def _text_content(element) -> str:
    return "".join(text for text in element.itertext() if text is not None)


def _safe(lookup: Callable[[], T], default: T, what: str) -> T:
    """Run a single property lookup; any localized failure makes the property absent."""
    try:
        return lookup()
    except (AttributeError, TypeError, ValueError, etree.LxmlError) as e:
        logger.debug(f"Treating {what} as absent: {e}")
        return default


def _bag_items(container) -> List[str]:
    """Trimmed, non-blank ``rdf:li`` texts of every ``rdf:Bag`` under ``container``, in order."""
    items = []
    for bag in container.iter(_rdf("Bag")):
        for item in bag.iter(_rdf("li")):
            text = _text_content(item).strip()
            if text:
                items.append(text)
    return items


@dataclass(frozen=True)
class RightsFields:
    certificate: Optional[str] = None
    marked: Optional[bool] = None
    usage_terms: Optional[str] = None
    web_statement: Optional[str] = None
    owners: List[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        return (
            self.certificate is None
            and self.marked is None
            and self.usage_terms is None
            and self.web_statement is None
            and not self.owners
        )


@dataclass(frozen=True)
class RightsResult:
    """Outcome of one extraction strategy."""

    success: bool
    fields: RightsFields = field(default_factory=RightsFields)
    error: Optional[str] = None

    @classmethod
    def ok(cls, fields: RightsFields) -> "RightsResult":
        return cls(success=True, fields=fields)

    @classmethod
    def failed(cls, error: str) -> "RightsResult":
        return cls(success=False, error=error)


class XmpRightsSchema:
    """
    Typed accessors over the ``rdf:Description`` elements holding xmpRights properties.

    RDF allows one schema to be split across several descriptions; text
    properties come from the first description that has them and bag
    properties are gathered from all of them, in document order.
    """

    def __init__(self, descriptions):
        self.descriptions = list(descriptions)

    @staticmethod
    def _carries_rights(description) -> bool:
        if any(name.startswith(f"{{{XMP_RIGHTS_NS}}}") for name in description.attrib):
            return True
        return any(isinstance(child.tag, str) and child.tag.startswith(f"{{{XMP_RIGHTS_NS}}}") for child in description)

    @classmethod
    def find(cls, root) -> Optional["XmpRightsSchema"]:
        """Schema over every ``rdf:Description`` carrying an xmpRights property, or None."""
        descriptions = [description for description in root.iter(_rdf("Description")) if cls._carries_rights(description)]
        if not descriptions:
            return None
        return cls(descriptions)

    @staticmethod
    def _description_text(description, local_name: str) -> Optional[str]:
        value = _clean(description.get(_rights(local_name)))
        if value is not None:
            return value
        element = description.find(_rights(local_name))
        if element is None:
            return None
        resource = _clean(element.get(_rdf("resource")))
        if resource is not None:
            return resource
        alternative = element.find(f"{_rdf('Alt')}/{_rdf('li')}")
        if alternative is not None:
            return _clean(_text_content(alternative))
        return _clean(_text_content(element))

    def text_property(self, local_name: str) -> Optional[str]:
        """
        Simple or language-alternative text property.

        Read from the attribute form first, then from the element form, where
        an ``rdf:Alt`` takes its first ``rdf:li``.
        """
        for description in self.descriptions:
            value = self._description_text(description, local_name)
            if value is not None:
                return value
        return None

    def bag_property(self, local_name: str) -> List[str]:
        items = []
        for description in self.descriptions:
            element = description.find(_rights(local_name))
            if element is not None:
                items.extend(_bag_items(element))
        return items

    @property
    def certificate(self) -> Optional[str]:
        return self.text_property("Certificate")

    @property
    def marked(self) -> Optional[bool]:
        return parse_marked(self.text_property("Marked"))

    @property
    def usage_terms(self) -> Optional[str]:
        return self.text_property("UsageTerms")

    @property
    def web_statement(self) -> Optional[str]:
        return self.text_property("WebStatement")

    @property
    def owners(self) -> List[str]:
        return self.bag_property("Owner")


class XmpRightsSchemaStrategy:
    name = "schema"

    def extract(self, root) -> RightsResult:
        try:
            schema = XmpRightsSchema.find(root)
        except Exception as e:
            return RightsResult.failed(f"schema lookup failed: {e}")
        if schema is None:
            return RightsResult.failed("no xmpRights schema in packet")

        return RightsResult.ok(RightsFields(
            certificate=_safe(lambda: schema.certificate, None, "Certificate"),
            marked=_safe(lambda: schema.marked, None, "Marked"),
            usage_terms=_safe(lambda: schema.usage_terms, None, "UsageTerms"),
            web_statement=_safe(lambda: schema.web_statement, None, "WebStatement"),
            owners=_safe(lambda: schema.owners, [], "Owner"),
        ))


class TreeWalkStrategy:
    name = "tree"

    def extract(self, root) -> RightsResult:
        if root is None or not isinstance(root.tag, str):
            return RightsResult.failed("no element to walk")

        return RightsResult.ok(RightsFields(
            certificate=_clean(_safe(lambda: self.attribute_or_child(root, "Certificate"), None, "Certificate")),
            marked=parse_marked(_clean(_safe(lambda: self.attribute_or_child(root, "Marked"), None, "Marked"))),
            usage_terms=_clean(_safe(lambda: self.attribute_or_child(root, "UsageTerms"), None, "UsageTerms")),
            web_statement=_clean(_safe(lambda: self.attribute_or_child(root, "WebStatement"), None, "WebStatement")),
            owners=_safe(lambda: self.bag_values(root, "Owner"), [], "Owner"),
        ))

    @staticmethod
    def attribute_or_child(element, local_name: str) -> Optional[str]:
        value = element.get(_rights(local_name))
        if value:
            return value

        for child in element.iter(_rights(local_name)):
            return _text_content(child)

        for description in element.iter(_rdf("Description")):
            value = description.get(_rights(local_name))
            if value:
                return value
        return None

    @staticmethod
    def bag_values(element, local_name: str) -> List[str]:
        values = []
        for container in element.iter(_rights(local_name)):
            values.extend(_bag_items(container))
        return values


class RightsExtractor:
    """Runs the rights strategies in order over one XMP packet."""

    def __init__(self, strategies: Optional[Sequence] = None):
        self.strategies = list(strategies) if strategies is not None else [XmpRightsSchemaStrategy(), TreeWalkStrategy()]
        self.logger = get_logger(self.__class__.__name__)

    def parse_packet(self, xmp_packet: XmpPacket):
        """Root element of a packet, or None when it is not well-formed XML."""
        if isinstance(xmp_packet, etree._ElementTree):
            return xmp_packet.getroot()
        if isinstance(xmp_packet, etree._Element):
            return xmp_packet
        if isinstance(xmp_packet, str):
            xmp_packet = xmp_packet.encode("utf-8")
        content = xmp_packet.strip()
        if not content:
            return None
        try:
            return etree.fromstring(content, _SECURE_XML_PARSER)
        except etree.XMLSyntaxError as e:
            self.logger.warning(f"Ignoring malformed XMP packet: {e}")
            return None

    def extract(self, xmp_packet: Optional[XmpPacket]) -> RightsFields:
        """
        Extract xmpRights properties from an XMP packet.

        Args:
            xmp_packet: Serialized packet (bytes or str) or an already parsed lxml element/tree

        Returns:
            RightsFields from the first successful strategy; empty when the packet
            is missing, malformed, or every strategy fails
        """
        if xmp_packet is None:
            return RightsFields()
        root = self.parse_packet(xmp_packet)
        if root is None:
            return RightsFields()

        for strategy in self.strategies:
            result = strategy.extract(root)
            if result.success:
                self.logger.debug(f"Rights extracted with {strategy.name} strategy")
                return result.fields
            self.logger.debug(f"Rights {strategy.name} strategy unavailable: {result.error}")
        return RightsFields()


def extract_rights(xmp_packet: Optional[XmpPacket]) -> RightsFields:
    return RightsExtractor().extract(xmp_packet)


def apply_rights(bag: MetadataBag, fields: RightsFields) -> MetadataBag:
    """
    Write extracted rights into a new bag.

    Single-valued properties replace any existing value; owners are appended
    after the owners the upstream engine already reported.
    """
    if fields.is_empty():
        return bag
    marked = None if fields.marked is None else str(fields.marked).lower()
    return bag.with_values(
        {
            P.XMP_RIGHTS_CERTIFICATE: fields.certificate,
            P.XMP_RIGHTS_MARKED: marked,
            P.XMP_RIGHTS_USAGE_TERMS: fields.usage_terms,
            P.XMP_RIGHTS_WEB_STATEMENT: fields.web_statement,
            P.XMP_RIGHTS_OWNER: fields.owners,
        },
        append=(P.XMP_RIGHTS_OWNER,),
    )
