"""Command line entry point for filename-sanitize."""

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from .application import FilenameSanitize
from .domain.errors import FilenameSanitizeError
from .infrastructure.config import Config
from .infrastructure.logging import LoggerSetup, ProgressTracker, get_logger


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="filename-sanitize",
        description="Turn arbitrary path strings into safe, cross-platform filenames",
        epilog="""
Examples:
  # Sanitize a single name
  filename-sanitize "File NaME.Zip"

  # Keep the directory and change the extension
  filename-sanitize "C:/Photos/My Holiday (1).JPG" --keep-directory --extension webp

  # Sanitize every line of a file, one result per line on stdout
  filename-sanitize --names-file uploads.txt --default untitled.bin

  # Using .env file for configuration
  echo 'BASE_DIRECTORY=/srv/uploads' > .env
  filename-sanitize "report.pdf"
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "names",
        nargs="*",
        metavar="NAME",
        help="Raw filenames or paths to sanitize",
    )
    parser.add_argument(
        "--names-file",
        type=Path,
        metavar="FILE",
        help="Read names from file (one name per line). Alternative to NAME arguments",
    )
    parser.add_argument("--prefix", help="Prefix placed in front of the base name")
    parser.add_argument("--suffix", help="Suffix placed after the base name")
    parser.add_argument(
        "--extension",
        metavar="EXT",
        help="Replace the original extension (an empty string removes it)",
    )
    parser.add_argument("--base-dir", help="Trusted directory prepended to every result")
    parser.add_argument(
        "--default",
        dest="default_filename",
        metavar="NAME",
        help="Fallback filename for input that is unusable or sanitizes to nothing",
    )
    parser.add_argument("--separator", help="Replacement for removed characters (default: '-')")
    parser.add_argument(
        "--keep-extension",
        action="store_true",
        help="Keep the original extension inside the name",
    )
    parser.add_argument(
        "--keep-directory",
        action="store_true",
        help="Keep the sanitized directory in front of the filename",
    )
    parser.add_argument(
        "--embed-directory",
        action="store_true",
        help="Embed the sanitized directory into the filename",
    )
    parser.add_argument(
        "--preserve-case",
        action="store_true",
        help="Do not lowercase the filename",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output with debug logs",
    )
    parser.add_argument(
        "--log-file",
        action="store_true",
        default=None,
        help="Also write a debug log file into the log directory",
    )
    return parser.parse_args(argv)


def read_names_file(path: Path) -> list[str]:
    """Read names from a file, skipping blank lines and '#' comments."""
    names = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.rstrip("\r\n")
            if line.strip() and not line.lstrip().startswith("#"):
                names.append(line)
    return names


def build_sanitizer(raw: str, args: argparse.Namespace, config: Config) -> FilenameSanitize:
    """Configure a sanitizer for raw from the parsed options."""
    sanitizer = FilenameSanitize.of(raw)
    if args.prefix is not None:
        sanitizer.with_prefix(args.prefix)
    if args.suffix is not None:
        sanitizer.with_suffix(args.suffix)
    if args.extension is not None:
        sanitizer.with_new_extension(args.extension)
    if config.base_directory:
        sanitizer.with_base_directory(config.base_directory)
    if config.default_filename:
        sanitizer.with_default_filename(config.default_filename)
    if config.separator:
        sanitizer.with_custom_separator(config.separator)
    if args.keep_extension:
        sanitizer.keep_old_extension_in_name()
    if args.keep_directory:
        sanitizer.keep_directory()
    if args.embed_directory:
        sanitizer.embed_directory_in_name()
    if args.preserve_case:
        sanitizer.disable_lowercasing()
    return sanitizer


def main(argv: list[str] | None = None) -> NoReturn:
    """Sanitize every given name and print one result per line."""
    args = parse_args(argv)

    try:
        config = Config.from_args(
            base_directory=args.base_dir,
            default_filename=args.default_filename,
            separator=args.separator,
            verbose=args.verbose or None,
            log_to_file=args.log_file,
        )
        config.validate()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    LoggerSetup.initialize(config.log_dir, verbose=config.verbose, log_to_file=config.log_to_file)
    logger = get_logger(__name__)

    if args.names and args.names_file:
        logger.error("Cannot use both NAME arguments and --names-file")
        sys.exit(1)

    names = list(args.names)
    if args.names_file:
        try:
            names = read_names_file(args.names_file)
            logger.debug(f"Read {len(names)} names from {args.names_file}")
        except FileNotFoundError:
            logger.error(f"Names file not found: {args.names_file}")
            sys.exit(1)
        except OSError as e:
            logger.error(f"Error reading names file: {e}")
            sys.exit(1)

    if not names:
        logger.error("No names provided")
        sys.exit(1)

    tracker = ProgressTracker(logger, total=len(names))
    with tracker.track_operation("sanitize batch"):
        for raw in names:
            try:
                result = build_sanitizer(raw, args, config).get()
            except FilenameSanitizeError as e:
                tracker.record_failure(raw, e)
                continue
            tracker.record_success(raw, result)
            print(result)

    if len(names) > 1 or tracker.failed:
        tracker.log_summary()

    sys.exit(0 if tracker.failed == 0 else 1)


if __name__ == "__main__":
    main()
