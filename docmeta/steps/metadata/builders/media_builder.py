from typing import Any, Dict

from docmeta.model.records import MediaMetadata
from docmeta.steps.metadata import properties as P
from docmeta.steps.metadata.builders.base_builder import BaseMetadataBuilder
from docmeta.steps.metadata.field_mapper import FieldMapper

DM = P.XMP_DM_PREFIX
AUDIO = P.AUDIO_PREFIX


class MediaMetadataBuilder(BaseMetadataBuilder):
    """Audio and video files."""

    record_class = MediaMetadata

    def _map_fields(self, mapper: FieldMapper) -> Dict[str, Any]:
        return {
            "title": mapper.string(P.DC_TITLE),
            "creator": mapper.string(P.DC_CREATOR),
            "created": mapper.timestamp(P.DC_CREATED),
            "modified": mapper.timestamp(P.DC_MODIFIED),
            "duration": mapper.floating(DM + "duration"),
            "channels": mapper.integer(P.CHANNELS),
            "sample_rate": mapper.integer(P.SAMPLE_RATE),
            "bitrate": mapper.integer(P.BITRATE),
            "bits_per_sample": mapper.integer(AUDIO + "bitsPerSample"),
            "audio_channel_type": mapper.string(DM + "audioChannelType"),
            "audio_compressor": mapper.string(DM + "audioCompressor"),
            "audio_sample_type": mapper.string(DM + "audioSampleType"),
            "album": mapper.string(DM + "album"),
            "album_artist": mapper.string(DM + "albumArtist"),
            "artist": mapper.string(DM + "artist"),
            "composer": mapper.string(DM + "composer"),
            "genre": mapper.string(DM + "genre"),
            "track_number": mapper.integer(DM + "trackNumber"),
            "disc_number": mapper.integer(DM + "discNumber"),
            "release_date": mapper.timestamp(DM + "releaseDate"),
            "copyright": mapper.string(DM + "copyright"),
            "tempo": mapper.floating(DM + "tempo"),
            "loop": mapper.boolean(DM + "loop"),
            "video_frame_rate": mapper.string(DM + "videoFrameRate"),
            "video_compressor": mapper.string(DM + "videoCompressor"),
            "video_color_space": mapper.string(DM + "videoColorSpace"),
            "codec": mapper.string(DM + "codec"),
            "major_brand": mapper.string(DM + "majorBrand"),
            "width": mapper.integer(P.TIFF_PREFIX + "ImageWidth"),
            "height": mapper.integer(P.TIFF_PREFIX + "ImageLength"),
            "latitude": mapper.floating(P.GEO_LAT),
            "longitude": mapper.floating(P.GEO_LONG),
            "altitude": mapper.floating(P.GEO_ALT),
        }
