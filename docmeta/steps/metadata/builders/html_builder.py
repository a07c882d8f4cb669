from typing import Any, Dict

from docmeta.model.records import HtmlMetadata, OpenGraphData, TwitterCardData
from docmeta.steps.metadata import properties as P
from docmeta.steps.metadata.builders.base_builder import BaseMetadataBuilder
from docmeta.steps.metadata.builders.image_builder import non_empty
from docmeta.steps.metadata.field_mapper import FieldMapper

META = P.HTML_META_PREFIX
LINK = P.HTML_LINK_PREFIX


class HtmlMetadataBuilder(BaseMetadataBuilder):
    record_class = HtmlMetadata

    def _map_fields(self, mapper: FieldMapper) -> Dict[str, Any]:
        og = P.HTML_OG_PREFIX
        open_graph = OpenGraphData(
            title=mapper.string(og + "title"),
            description=mapper.string(og + "description"),
            type=mapper.string(og + "type"),
            url=mapper.string(og + "url"),
            image=mapper.string(og + "image"),
            site_name=mapper.string(og + "site_name"),
        )
        tw = P.HTML_TWITTER_PREFIX
        twitter_card = TwitterCardData(
            card=mapper.string(tw + "card"),
            site=mapper.string(tw + "site"),
            creator=mapper.string(tw + "creator"),
            title=mapper.string(tw + "title"),
            description=mapper.string(tw + "description"),
            image=mapper.string(tw + "image"),
        )

        title = mapper.string(P.HTML_TITLE) or mapper.string(P.DC_TITLE)

        return {
            "title": title,
            "description": mapper.string(META + "description"),
            "keywords": mapper.string(META + "keywords"),
            "author": mapper.string(META + "author"),
            "generator": mapper.string(META + "generator"),
            "robots": mapper.string(META + "robots"),
            "viewport": mapper.string(META + "viewport"),
            "charset": mapper.string(META + "charset"),
            "refresh": mapper.string(META + "refresh"),
            "canonical_url": mapper.string(LINK + "canonical"),
            "icon": mapper.string(LINK + "icon"),
            "stylesheet": mapper.string(LINK + "stylesheet"),
            "alternate": mapper.string(LINK + "alternate"),
            "rss_feed": mapper.string(LINK + "rss"),
            "atom_feed": mapper.string(LINK + "atom"),
            "script_source": mapper.string(P.HTML_SCRIPT_SRC),
            "data_uris": mapper.strings(P.HTML_DATA_URI),
            "content_encoding": mapper.string(P.CONTENT_ENCODING),
            "content_language": mapper.string(P.CONTENT_LANGUAGE),
            "content_location": mapper.string(P.CONTENT_LOCATION),
            "detected_encoding": mapper.string(P.DETECTED_ENCODING),
            "open_graph": non_empty(open_graph),
            "twitter_card": non_empty(twitter_card),
            "meta_dublin_core": mapper.prefixed(P.HTML_DC_PREFIX),
        }
