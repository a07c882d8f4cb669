from typing import Any, Dict, Optional

from docmeta.model.records import ExifData, GpsData, ImageMetadata, IptcData, RecordModel
from docmeta.steps.metadata import properties as P
from docmeta.steps.metadata.builders.base_builder import BaseMetadataBuilder
from docmeta.steps.metadata.field_mapper import FieldMapper

TIFF = P.TIFF_PREFIX
EXIF = P.EXIF_PREFIX
PHOTOSHOP = P.PHOTOSHOP_PREFIX
IPTC = P.IPTC_PREFIX


def non_empty(model: RecordModel) -> Optional[RecordModel]:
    """The model itself, or None when every attribute is still at its default."""
    return model if model.model_dump(exclude_defaults=True) else None


class ImageMetadataBuilder(BaseMetadataBuilder):
    record_class = ImageMetadata

    def _map_fields(self, mapper: FieldMapper) -> Dict[str, Any]:
        width = mapper.integer(TIFF + "ImageWidth")
        height = mapper.integer(TIFF + "ImageLength")

        exif = ExifData(
            make=mapper.string(TIFF + "Make"),
            model=mapper.string(TIFF + "Model"),
            software=mapper.string(TIFF + "Software"),
            exposure_time=mapper.floating(EXIF + "ExposureTime"),
            f_number=mapper.floating(EXIF + "FNumber"),
            focal_length=mapper.floating(EXIF + "FocalLength"),
            flash_fired=mapper.string(EXIF + "Flash"),
            iso_speed_ratings=mapper.integers(EXIF + "IsoSpeedRatings"),
            original_date=mapper.timestamp(EXIF + "DateTimeOriginal"),
        )
        iptc = IptcData(
            headline=mapper.string(PHOTOSHOP + "Headline"),
            credit_line=mapper.string(PHOTOSHOP + "Credit"),
            category=mapper.string(PHOTOSHOP + "Category"),
            copyright_notice=mapper.string(IPTC + "CopyrightNotice"),
            city=mapper.string(PHOTOSHOP + "City"),
            state=mapper.string(PHOTOSHOP + "State"),
            country=mapper.string(PHOTOSHOP + "Country"),
            keywords=mapper.strings(IPTC + "Keywords"),
        )
        gps = GpsData(
            latitude=mapper.floating(P.GEO_LAT),
            longitude=mapper.floating(P.GEO_LONG),
            altitude=mapper.floating(P.GEO_ALT),
            timestamp=mapper.timestamp(P.GPS_TIMESTAMP),
        )

        return {
            "width": width,
            "height": height,
            "bits_per_sample": mapper.integers(TIFF + "BitsPerSample"),
            "samples_per_pixel": mapper.integer(TIFF + "SamplesPerPixel"),
            "orientation": mapper.integer(TIFF + "Orientation"),
            "resolution_horizontal": mapper.floating(TIFF + "XResolution"),
            "resolution_vertical": mapper.floating(TIFF + "YResolution"),
            "resolution_unit": mapper.string(TIFF + "ResolutionUnit"),
            "modified": mapper.timestamp(P.DC_MODIFIED),
            "comments": mapper.string(P.COMMENTS),
            "exif": non_empty(exif),
            "iptc": non_empty(iptc),
            "gps": non_empty(gps),
        }
