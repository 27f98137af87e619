import argparse
import logging
import sys
from pathlib import Path

from .core import MetadataPipeline


def setup_logging(verbose: bool):
    """Sets up console logging."""
    log_level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    # Silence chatty libraries
    logging.getLogger("exifread").setLevel(logging.ERROR)

def parse_args(argv=None):
    p = argparse.ArgumentParser(
        prog="image-metadata",
        description="Extracts metadata from image files into json"
    )

    p.add_argument("files", type=Path, nargs="+", metavar="FILES", help="Image files to process")

    p.add_argument("--keep-going", action="store_true",
                   help="Continue with the remaining files after a failure (exit status is still non-zero)")
    p.add_argument("-q", "--quiet", action="store_true", help="Hide the progress bar")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return p.parse_args(argv)

def report_failure(path: Path, error: Exception):
    print(f"While processing {path}, we hit an error:\n  {error}", file=sys.stderr)

def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.verbose)

    pipeline = MetadataPipeline()

    try:
        failures = pipeline.process_all(
            args.files,
            keep_going=args.keep_going,
            show_progress=not args.quiet
        )
    except KeyboardInterrupt:
        logging.warning("Operation cancelled by user.")
        sys.exit(1)

    for failure in failures:
        report_failure(failure.path, failure.error)

    if failures:
        sys.exit(1)

if __name__ == "__main__":
    main()
