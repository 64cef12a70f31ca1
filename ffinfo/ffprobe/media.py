"""Typed model of ffprobe format and stream output

Responsibilities:
- Describe the JSON document printed by ``ffprobe -show_format -show_streams``
- Build the model from that document, rejecting malformed input
- Render the model back to indented JSON without losing populated values

Every field except ``Format.filename`` and ``Stream.index`` is optional and
``None`` means ffprobe did not report it, so a reported ``0`` stays ``0``.
Rates, sizes and counts stay as the text ffprobe printed; ffprobe uses
"N/A" and values beyond 64 bits in some of them.
"""

import json
from dataclasses import dataclass, field, fields, is_dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Tuple, Union

from ..exceptions import DeserializationError
from .duration import DurationResult, resolve_stream_duration


def _text(key: str = None):
    return field(default=None, metadata={"type": str, "key": key})


def _int(key: str = None):
    return field(default=None, metadata={"type": int, "key": key})


def _nested(cls, key: str = None):
    return field(default=None, metadata={"type": cls, "key": key})


def _required(kind):
    return field(metadata={"type": kind, "required": True})


@dataclass(frozen=True)
class FormatTags:
    """Container-level metadata tags"""
    major_brand: Optional[str] = _text()
    minor_version: Optional[str] = _text()
    compatible_brands: Optional[str] = _text()
    creation_time: Optional[str] = _text()
    com_apple_finalcutstudio_media_uuid: Optional[str] = _text("com.apple.finalcutstudio.media.uuid")
    encoder: Optional[str] = _text()
    project_name: Optional[str] = _text()
    uid: Optional[str] = _text()
    generation_uid: Optional[str] = _text()
    company_name: Optional[str] = _text()
    product_name: Optional[str] = _text()
    product_version: Optional[str] = _text()
    product_uid: Optional[str] = _text()
    modification_date: Optional[str] = _text()
    application_platform: Optional[str] = _text()
    material_package_umid: Optional[str] = _text()
    material_package_name: Optional[str] = _text()
    media_type: Optional[str] = _text()
    playback_requirements: Optional[str] = _text()
    timecode: Optional[str] = _text()
    title: Optional[str] = _text()
    album: Optional[str] = _text()
    genre: Optional[str] = _text()
    comment: Optional[str] = _text()
    track: Optional[str] = _text()
    artist: Optional[str] = _text()
    album_artist: Optional[str] = _text()
    date: Optional[str] = _text()
    sort_name: Optional[str] = _text()
    description: Optional[str] = _text()
    synopsis: Optional[str] = _text()
    copyright: Optional[str] = _text()
    hd_video: Optional[str] = _text()
    rating: Optional[str] = _text()
    itunextc: Optional[str] = _text("iTunEXTC")
    itunmovi: Optional[str] = _text("iTunMOVI")


@dataclass(frozen=True)
class Format:
    """Container-level information (the ``format`` object)"""
    filename: str = _required(str)
    nb_streams: Optional[int] = _int()
    nb_programs: Optional[int] = _int()
    format_name: Optional[str] = _text()
    format_long_name: Optional[str] = _text()
    start_time: Optional[str] = _text()
    duration: Optional[str] = _text()
    size: Optional[str] = _text()
    bit_rate: Optional[str] = _text()
    probe_score: Optional[int] = _int()
    tags: Optional[FormatTags] = _nested(FormatTags)


@dataclass(frozen=True)
class Disposition:
    """Per-stream role flags, each reported as 0 or 1"""
    default: Optional[int] = _int()
    dub: Optional[int] = _int()
    original: Optional[int] = _int()
    comment: Optional[int] = _int()
    lyrics: Optional[int] = _int()
    karaoke: Optional[int] = _int()
    forced: Optional[int] = _int()
    hearing_impaired: Optional[int] = _int()
    visual_impaired: Optional[int] = _int()
    clean_effects: Optional[int] = _int()
    attached_pic: Optional[int] = _int()
    timed_thumbnails: Optional[int] = _int()
    captions: Optional[int] = _int()
    descriptions: Optional[int] = _int()
    metadata: Optional[int] = _int()
    dependent: Optional[int] = _int()
    still_image: Optional[int] = _int()


@dataclass(frozen=True)
class StreamTags:
    """Per-stream metadata tags.

    Matroska statistics tags show up both with and without a language
    suffix (``DURATION`` and ``DURATION-eng``) depending on the muxer.
    Both spellings are kept as separate fields.
    """
    creation_time: Optional[str] = _text()
    language: Optional[str] = _text()
    title: Optional[str] = _text()
    handler_name: Optional[str] = _text()
    vendor_id: Optional[str] = _text()
    encoder: Optional[str] = _text()
    timecode: Optional[str] = _text()
    file_package_umid: Optional[str] = _text()
    file_package_name: Optional[str] = _text()
    track_name: Optional[str] = _text()
    bps: Optional[str] = _text("BPS")
    duration: Optional[str] = _text("DURATION")
    number_of_frames: Optional[str] = _text("NUMBER_OF_FRAMES")
    number_of_bytes: Optional[str] = _text("NUMBER_OF_BYTES")
    statistics_writing_app: Optional[str] = _text("_STATISTICS_WRITING_APP")
    statistics_writing_date_utc: Optional[str] = _text("_STATISTICS_WRITING_DATE_UTC")
    statistics_tags: Optional[str] = _text("_STATISTICS_TAGS")
    bps_eng: Optional[str] = _text("BPS-eng")
    duration_eng: Optional[str] = _text("DURATION-eng")
    number_of_frames_eng: Optional[str] = _text("NUMBER_OF_FRAMES-eng")
    number_of_bytes_eng: Optional[str] = _text("NUMBER_OF_BYTES-eng")
    statistics_writing_app_eng: Optional[str] = _text("_STATISTICS_WRITING_APP-eng")
    statistics_writing_date_utc_eng: Optional[str] = _text("_STATISTICS_WRITING_DATE_UTC-eng")
    statistics_tags_eng: Optional[str] = _text("_STATISTICS_TAGS-eng")


@dataclass(frozen=True)
class SideData:
    """One entry of a stream's ``side_data_list``"""
    side_data_type: Optional[str] = _text()


@dataclass(frozen=True)
class Stream:
    """One elementary stream (video, audio, subtitle, data or attachment)"""
    index: int = _required(int)
    codec_name: Optional[str] = _text()
    codec_long_name: Optional[str] = _text()
    profile: Optional[str] = _text()
    codec_type: Optional[str] = _text()
    codec_time_base: Optional[str] = _text()
    codec_tag_string: Optional[str] = _text()
    codec_tag: Optional[str] = _text()
    width: Optional[int] = _int()
    height: Optional[int] = _int()
    coded_width: Optional[int] = _int()
    coded_height: Optional[int] = _int()
    closed_captions: Optional[int] = _int()
    film_grain: Optional[int] = _int()
    has_b_frames: Optional[int] = _int()
    sample_aspect_ratio: Optional[str] = _text()
    display_aspect_ratio: Optional[str] = _text()
    pix_fmt: Optional[str] = _text()
    level: Optional[int] = _int()
    color_range: Optional[str] = _text()
    color_space: Optional[str] = _text()
    color_transfer: Optional[str] = _text()
    color_primaries: Optional[str] = _text()
    chroma_location: Optional[str] = _text()
    field_order: Optional[str] = _text()
    refs: Optional[int] = _int()
    is_avc: Optional[str] = _text()
    nal_length_size: Optional[str] = _text()
    sample_fmt: Optional[str] = _text()
    sample_rate: Optional[str] = _text()
    channels: Optional[int] = _int()
    channel_layout: Optional[str] = _text()
    bits_per_sample: Optional[int] = _int()
    initial_padding: Optional[int] = _int()
    dmix_mode: Optional[str] = _text()
    ltrt_cmixlev: Optional[str] = _text()
    ltrt_surmixlev: Optional[str] = _text()
    loro_cmixlev: Optional[str] = _text()
    loro_surmixlev: Optional[str] = _text()
    id: Optional[str] = _text()
    r_frame_rate: Optional[str] = _text()
    avg_frame_rate: Optional[str] = _text()
    time_base: Optional[str] = _text()
    start_pts: Optional[int] = _int()
    start_time: Optional[str] = _text()
    duration_ts: Optional[int] = _int()
    duration: Optional[str] = _text()
    bit_rate: Optional[str] = _text()
    max_bit_rate: Optional[str] = _text()
    bits_per_raw_sample: Optional[str] = _text()
    nb_frames: Optional[str] = _text()
    extradata_size: Optional[int] = _int()
    disposition: Optional[Disposition] = _nested(Disposition)
    tags: Optional[StreamTags] = _nested(StreamTags)
    side_data_list: Optional[Tuple[SideData, ...]] = field(
        default=None, metadata={"type": SideData, "many": True}
    )


@dataclass(frozen=True)
class MediaFile:
    """Everything ffprobe reported about one file"""
    format: Format = _required(Format)
    streams: Tuple[Stream, ...] = field(
        default=(), metadata={"type": Stream, "many": True, "omit_empty": True}
    )

    @classmethod
    def from_json(cls, raw: Union[str, bytes]) -> "MediaFile":
        return deserialize(raw)

    def to_json(self) -> str:
        return serialize(self)

    def stream_duration(self, stream_index: int) -> DurationResult:
        """Best-effort duration of one stream, see resolve_stream_duration"""
        return resolve_stream_duration(self, stream_index)

    def __str__(self) -> str:
        return serialize(self)


def _decode(cls, data: Any, path: str):
    if not isinstance(data, dict):
        raise DeserializationError("expected an object", path or None)

    values = {}
    for f in fields(cls):
        key = f.metadata.get("key") or f.name
        field_path = f"{path}.{key}" if path else key
        value = data.get(key)
        if value is None:
            if f.metadata.get("required"):
                raise DeserializationError("required field is missing", field_path)
            continue
        values[f.name] = _decode_value(f.metadata, value, field_path)
    return cls(**values)


def _decode_value(metadata: Dict[str, Any], value: Any, path: str) -> Any:
    kind = metadata["type"]
    if metadata.get("many"):
        if not isinstance(value, list):
            raise DeserializationError("expected a list", path)
        return tuple(_decode(kind, item, f"{path}[{n}]") for n, item in enumerate(value))
    if is_dataclass(kind):
        return _decode(kind, value, path)
    # bool is an int subclass but never a valid ffprobe integer
    if kind is int and (isinstance(value, bool) or not isinstance(value, int)):
        raise DeserializationError(f"expected an integer, got {value!r}", path)
    if kind is str and not isinstance(value, str):
        raise DeserializationError(f"expected a string, got {value!r}", path)
    return value


def deserialize(raw: Union[str, bytes]) -> MediaFile:
    """
    Build a MediaFile from ffprobe's JSON output.

    Unknown keys are ignored so newer ffprobe releases keep working.

    Args:
        raw: JSON text as printed by ffprobe.

    Returns:
        The populated MediaFile.

    Raises:
        DeserializationError: If the text is not JSON, ``format.filename``
            or a stream ``index`` is missing, or a known field has the
            wrong JSON type.
    """
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as e:
        raise DeserializationError(f"invalid JSON: {e}") from e
    return _decode(MediaFile, data, "")


def _encode(obj) -> Dict[str, Any]:
    out = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if value is None:
            continue
        if f.metadata.get("many"):
            if not value and f.metadata.get("omit_empty"):
                continue
            value = [_encode(item) for item in value]
        elif is_dataclass(value):
            value = _encode(value)
        out[f.metadata.get("key") or f.name] = value
    return out


def to_dict(media: MediaFile) -> Dict[str, Any]:
    """Plain-dict form of a MediaFile using ffprobe's key names; absent fields are left out"""
    return _encode(media)


def serialize(media: MediaFile) -> str:
    """Render a MediaFile as indented JSON for display and debugging"""
    return json.dumps(to_dict(media), indent=2, ensure_ascii=False)


def parse_tag_time(value: Optional[str]) -> Optional[datetime]:
    """
    Parse a temporal tag such as ``creation_time`` into a datetime.

    ffprobe prints these as ISO 8601 (``2019-05-10T12:34:56.000000Z``);
    some containers carry only a year in ``date``. Returns None when the
    tag is absent or not a recognizable date.
    """
    if not value:
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.strptime(text, "%Y")
    except ValueError:
        return None
