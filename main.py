"""Migrate Presenter songs to ProPresenter 5.

Steps:
  0) cd to the directory holding the Presenter files ("*.txt")
  1) run with -1 to strip the Presenter files down to plain_text/*.txt
  2) import the plain text files into ProPresenter 5
  3) copy the imported ProPresenter 5 files into propresenter_xml/
  4) run with -2 to add metadata, written to modified_xml/*.pro5
  5) delete the imported songs from ProPresenter 5
  6) import modified_xml/*.pro5 into ProPresenter 5
"""
import argparse
import logging
import sys
from pathlib import Path

from presenter_migrator.batch import extract_plain_text, supplement_metadata
from presenter_migrator.constants import (
    DEFAULT_ENCODING,
    DEFAULT_LOG_FILE,
    DEFAULT_SOURCE_DIR,
    MODIFIED_XML_DIR,
    PLAIN_TEXT_DIR,
    PROPRESENTER_DIR,
)
from presenter_migrator.renderers import RenderFormat
from presenter_migrator.utils import setup_logging

# Set up logger
logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="presenter-migrator",
        description="Migrate Presenter songs to ProPresenter 5.",
        epilog="Run -1, import the plain text into ProPresenter 5, copy the .pro5 files into the "
               "ProPresenter directory, then run -2 and import the modified .pro5 files.",
    )
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument(
        "-1",
        dest="extract",
        action="store_true",
        help="Strip Presenter .txt files down to plain text files in the plain text directory"
    )
    mode.add_argument(
        "-2",
        dest="supplement",
        action="store_true",
        help="Add metadata from Presenter .txt files to the .pro5 files in the ProPresenter "
             "directory and store them in the output directory"
    )
    parser.add_argument(
        "--source",
        type=str,
        default=DEFAULT_SOURCE_DIR,
        help="Directory holding the Presenter .txt files (default: %(default)s)"
    )
    parser.add_argument(
        "--plain-text-dir",
        type=str,
        default=PLAIN_TEXT_DIR,
        help="Output directory for -1 (default: %(default)s)"
    )
    parser.add_argument(
        "--propresenter-dir",
        type=str,
        default=PROPRESENTER_DIR,
        help="Directory holding the imported .pro5 files for -2 (default: %(default)s)"
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=MODIFIED_XML_DIR,
        help="Output directory for -2 (default: %(default)s)"
    )
    parser.add_argument(
        "--encoding",
        type=str,
        default=DEFAULT_ENCODING,
        help="Encoding of Presenter and .pro5 files (default: %(default)s)"
    )
    parser.add_argument(
        "--format",
        type=RenderFormat,
        choices=list(RenderFormat),
        default=RenderFormat.PLAIN_TEXT,
        metavar="{" + ",".join(fmt.value for fmt in RenderFormat) + "}",
        help="Text format written by -1 (default: plain_text)"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Skip songs whose slide count differs from the .pro5 slide groups instead of warning"
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=DEFAULT_LOG_FILE,
        help="Log file path (default: %(default)s)"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    # Set up logging
    setup_logging(args.log_file)

    source = Path(args.source)
    if not source.is_dir():
        logger.error(f"Presenter directory not found: {source}")
        return 1

    if args.extract:
        result = extract_plain_text(source, Path(args.plain_text_dir), args.encoding, args.format)
    else:
        propresenter_dir = Path(args.propresenter_dir)
        if not propresenter_dir.is_dir():
            logger.error(f"ProPresenter directory not found: {propresenter_dir}")
            return 1
        result = supplement_metadata(
            source, propresenter_dir, Path(args.output_dir), args.encoding, args.strict
        )

    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
