"""ffprobe command execution

Responsibilities:
- Build the ffprobe command line
- Run ffprobe and capture its JSON output
- Turn launch failures, timeouts and non-zero exits into InvocationError
"""

import subprocess
import logging
from pathlib import Path
from typing import List, Optional, Union

from .. import config
from ..exceptions import InvocationError
from .media import MediaFile, deserialize

logger = logging.getLogger(__name__)


def build_probe_command(path: Union[str, Path], ffprobe_bin: Optional[str] = None) -> List[str]:
    """ffprobe command that prints format and stream info as compact JSON"""
    return [ffprobe_bin or config.FFPROBE_BIN] + list(config.PROBE_ARGS) + [str(path)]


def run_ffprobe(
    path: Union[str, Path],
    ffprobe_bin: Optional[str] = None,
    timeout: Optional[float] = None
) -> str:
    """
    Run ffprobe against a file and return its raw output.

    Args:
        path: Media file to probe.
        ffprobe_bin: ffprobe executable (default from config).
        timeout: Seconds to wait for ffprobe (default from config).

    Returns:
        ffprobe's stdout, a single JSON document.

    Raises:
        InvocationError: If ffprobe cannot be started, times out or exits
            non-zero. For a non-zero exit the message is ffprobe's stderr.
    """
    cmd = build_probe_command(path, ffprobe_bin)
    timeout = timeout if timeout is not None else config.PROBE_TIMEOUT
    logger.debug("Running command: %s", " ".join(cmd))
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False
        )
    except subprocess.TimeoutExpired as e:
        logger.error("ffprobe timed out after %ss: %s", timeout, path)
        raise InvocationError(f"ffprobe timed out after {timeout}s") from e
    except OSError as e:
        logger.error("Failed to execute %s: %s", cmd[0], e)
        raise InvocationError(f"Failed to execute {cmd[0]}: {e}") from e

    if result.returncode != 0:
        stderr = result.stderr or ""
        logger.error("Command failed: %s", " ".join(cmd))
        logger.error("Error output: %s", stderr.strip())
        raise InvocationError(
            stderr.strip() or f"ffprobe exited with code {result.returncode}",
            exit_code=result.returncode,
            stderr=stderr
        )
    return result.stdout


def probe(
    path: Union[str, Path],
    ffprobe_bin: Optional[str] = None,
    timeout: Optional[float] = None
) -> MediaFile:
    """
    Probe a media file.

    Raises:
        InvocationError: If ffprobe fails.
        DeserializationError: If its output is not a usable document.
    """
    return deserialize(run_ffprobe(path, ffprobe_bin, timeout))
