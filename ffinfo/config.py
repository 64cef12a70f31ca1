"""Configuration settings for ffinfo

User-configurable settings come from environment variables:
- FFINFO_FFPROBE: ffprobe binary to run
- FFINFO_PROBE_TIMEOUT: seconds to wait for ffprobe
- FFINFO_LOG_LEVEL: console logging level for the ffinfo command
- FFINFO_LOG_FILE: optional file that also receives log output
"""

import os
from pathlib import Path

FFPROBE_BIN = os.environ.get("FFINFO_FFPROBE", "ffprobe")

PROBE_TIMEOUT = float(os.environ.get("FFINFO_PROBE_TIMEOUT", "30"))

# Quiet logging, format + streams, compact JSON
PROBE_ARGS = (
    "-loglevel", "error",
    "-hide_banner",
    "-show_format",
    "-show_streams",
    "-print_format", "json=c=1",
)

# Logging configuration
LOG_LEVEL = os.environ.get("FFINFO_LOG_LEVEL", "WARNING")  # DEBUG, INFO, WARNING, ERROR, CRITICAL

_log_file = os.environ.get("FFINFO_LOG_FILE")
LOG_FILE = Path(_log_file) if _log_file else None
