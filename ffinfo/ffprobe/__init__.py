"""FFProbe model and execution

This package provides:
- A typed model of ffprobe's format and stream output
- Per-stream duration resolution with fallbacks
- Running ffprobe and parsing its result
"""

from .duration import DurationResult, DurationStatus, resolve_stream_duration
from .media import (
    MediaFile, Format, FormatTags, Stream, StreamTags, Disposition, SideData,
    deserialize, serialize, to_dict, parse_tag_time
)
from .exec import build_probe_command, run_ffprobe, probe

__all__ = [
    'DurationResult',
    'DurationStatus',
    'resolve_stream_duration',
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
    'build_probe_command',
    'run_ffprobe',
    'probe'
]
