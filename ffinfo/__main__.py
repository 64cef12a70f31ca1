"""
Command-line interface for inspecting a media file with ffinfo
"""
import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from . import config
from .exceptions import FFInfoError
from .ffprobe import DurationStatus, probe
from .formatting import print_error, print_json, print_success, print_warning
from .logging import configure_logging

def parse_args(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description="Print ffprobe format and stream information as JSON"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=config.LOG_LEVEL,
        help="Set logging level (default: %(default)s)"
    )
    parser.add_argument(
        "--ffprobe",
        dest="ffprobe_bin",
        default=config.FFPROBE_BIN,
        help="ffprobe executable (default: %(default)s)"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=config.PROBE_TIMEOUT,
        help="Seconds to wait for ffprobe (default: %(default)s)"
    )
    parser.add_argument(
        "--stream",
        type=int,
        default=None,
        help="Also resolve the duration of this stream"
    )
    parser.add_argument(
        "input",
        type=Path,
        help="Media file to probe"
    )
    return parser.parse_args(argv)

def main(argv=None):
    """Main entry point"""
    args = parse_args(argv)
    configure_logging(args.log_level, config.LOG_FILE)
    log = logging.getLogger("ffinfo")

    try:
        media = probe(args.input, args.ffprobe_bin, args.timeout)
    except KeyboardInterrupt:
        log.warning("Probe interrupted by user")
        return 130
    except FFInfoError as e:
        print_error(f"Failed to probe {args.input}: {e}")
        return 1

    print_json(media.to_json())

    if args.stream is not None:
        result = media.stream_duration(args.stream)
        if result.ok:
            print_success(f"Stream {args.stream} duration: {result.seconds:.3f}s ({result.status.value})")
        elif result.status is DurationStatus.FORMAT_FALLBACK:
            print_warning(f"Stream {args.stream} duration: {result.seconds:.3f}s ({result.message})")
        else:
            print_error(f"Stream {args.stream} duration unavailable: {result.message}")
            return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
