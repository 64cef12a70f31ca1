"""Timecode to seconds conversion

Parses durations written as ``[[H:]M:]S[.ms]``, the form Matroska muxers
store in ``DURATION`` tags (``00:01:02.500000000``).
"""


def parse_seconds(text: str) -> float:
    """
    Parse a decimal seconds value the way ffprobe prints it.

    Stricter than ``float()``: surrounding whitespace and digit
    underscores are rejected.

    Raises:
        ValueError: If the text is not a plain number.
    """
    if "_" in text or text != text.strip():
        raise ValueError(f"could not convert string to float: {text!r}")
    return float(text)


def _component(text: str) -> float:
    try:
        return parse_seconds(text)
    except ValueError:
        return 0.0


def parse_timecode(text: str) -> float:
    """
    Convert a timecode to seconds.

    Accepts ``SS``, ``MM:SS`` or ``H:MM:SS``, each with an optional
    fractional part. The text is scanned right to left; a ``.`` closes the
    fractional part and ``:`` separates components.

    Parsing is best-effort: a component that is not a number counts as 0
    instead of failing the whole conversion, so ``"ab:cd:03"`` gives 3.0.
    With more than three components only the fractional part is kept.

    Args:
        text: Timecode text.

    Returns:
        Total seconds as a float.
    """
    fraction = 0.0
    components = []  # seconds first
    buffer = ""

    for position in range(len(text) - 1, -1, -1):
        char = text[position]
        if char == ".":
            fraction = _component("." + buffer)
            buffer = ""
        elif char == ":":
            components.append(buffer)
            buffer = ""
        elif position == 0:
            components.append(char + buffer)
        else:
            buffer = char + buffer

    if len(components) > 3:
        return fraction

    seconds, minutes, hours = [_component(c) for c in components] + [0.0] * (3 - len(components))
    return hours * 3600 + minutes * 60 + seconds + fraction
