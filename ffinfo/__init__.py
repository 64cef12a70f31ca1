"""
ffinfo - typed access to ffprobe output

This package provides:
- A frozen dataclass model of ffprobe's format and stream JSON
- Lossless deserialization and rendering of that JSON
- Best-effort per-stream duration resolution with explicit provenance
- A lenient H:MM:SS.ms timecode parser
- A thin wrapper that runs ffprobe and returns the parsed model
"""

__version__ = "0.1.0"

from .exceptions import FFInfoError, DeserializationError, InvocationError
from .timecode import parse_timecode
from .ffprobe import (
    MediaFile, Format, FormatTags, Stream, StreamTags, Disposition, SideData,
    deserialize, serialize, to_dict, parse_tag_time,
    DurationResult, DurationStatus, resolve_stream_duration,
    probe, run_ffprobe, build_probe_command,
)

__all__ = [
    'FFInfoError',
    'DeserializationError',
    'InvocationError',
    'parse_timecode',
    'MediaFile',
    'Format',
    'FormatTags',
    'Stream',
    'StreamTags',
    'Disposition',
    'SideData',
    'deserialize',
    'serialize',
    'to_dict',
    'parse_tag_time',
    'DurationResult',
    'DurationStatus',
    'resolve_stream_duration',
    'probe',
    'run_ffprobe',
    'build_probe_command',
]
