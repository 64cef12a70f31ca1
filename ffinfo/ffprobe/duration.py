"""Per-stream duration resolution

Responsibilities:
- Resolve a stream's duration in seconds with fallbacks
- Report where the value came from so callers can tell exact, derived,
  container-level and missing durations apart

Many containers (Matroska in particular) do not report a per-stream
duration, so resolution degrades from the stream's own ``duration`` to its
``DURATION`` tag, then to the container duration.
"""

from enum import Enum
from typing import TYPE_CHECKING, NamedTuple

from ..timecode import parse_seconds, parse_timecode

if TYPE_CHECKING:
    from .media import MediaFile


class DurationStatus(Enum):
    """Where a resolved duration came from"""
    OK = "ok"
    FROM_TAG = "derived from tag"
    FORMAT_FALLBACK = "format duration fallback"
    UNAVAILABLE = "unavailable"
    NO_STREAMS = "no streams"
    OUT_OF_RANGE = "index out of range"
    MALFORMED = "malformed duration"


class DurationResult(NamedTuple):
    """Seconds plus provenance.

    ``seconds`` is -1 for NO_STREAMS, OUT_OF_RANGE and MALFORMED and 0 for
    UNAVAILABLE. A FORMAT_FALLBACK result carries a usable value together
    with a diagnostic message.
    """
    seconds: float
    status: DurationStatus
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status in (DurationStatus.OK, DurationStatus.FROM_TAG)


def resolve_stream_duration(media: "MediaFile", stream_index: int) -> DurationResult:
    """
    Get a stream's duration in seconds with fallbacks.

    Order of sources:
        1. the stream's ``duration``
        2. its ``DURATION-eng`` tag, then its ``DURATION`` tag
        3. the container's ``format.duration``

    Earlier ffinfo releases read only ``DURATION-eng``. The plain
    ``DURATION`` tag is also read now, for muxers that write statistics
    tags without a language suffix. The two tags stay separate fields on
    StreamTags.

    Args:
        media: Probed file.
        stream_index: Position in ``media.streams``.

    Returns:
        DurationResult; nothing is raised.
    """
    streams = media.streams
    if not streams:
        return DurationResult(-1, DurationStatus.NO_STREAMS, "file has no streams")

    last = len(streams) - 1
    if stream_index < 0 or stream_index > last:
        return DurationResult(
            -1,
            DurationStatus.OUT_OF_RANGE,
            f"stream index {stream_index} is out of [0-{last}] range",
        )

    stream = streams[stream_index]
    if stream.duration is not None:
        try:
            return DurationResult(parse_seconds(stream.duration), DurationStatus.OK)
        except ValueError as e:
            return DurationResult(-1, DurationStatus.MALFORMED, str(e))

    tags = stream.tags
    if tags is not None:
        for tag in (tags.duration_eng, tags.duration):
            if tag is not None:
                return DurationResult(
                    parse_timecode(tag),
                    DurationStatus.FROM_TAG,
                    f"stream {stream_index} duration derived from tag {tag!r}",
                )

    format_duration = media.format.duration
    if format_duration is not None:
        try:
            seconds = parse_seconds(format_duration)
        except ValueError as e:
            return DurationResult(-1, DurationStatus.MALFORMED, str(e))
        return DurationResult(
            seconds,
            DurationStatus.FORMAT_FALLBACK,
            f"stream {stream_index} has no duration metadata, using format duration",
        )

    return DurationResult(
        0, DurationStatus.UNAVAILABLE, f"stream {stream_index} has no duration metadata"
    )
