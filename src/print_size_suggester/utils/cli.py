# utils/cli.py
"""
Command line interface for PrintSizeSuggester.
"""
from ..i18n import _
import argparse
import logging
import os
import re

from ..config import DPI_LEVELS, DPI_QUALITY, PRINT_QUALITY_INFO, SUPPORTED_EXTENSIONS

DIMENSIONS_PATTERN = re.compile(r'^\s*(\d+)\s*[x×X]\s*(\d+)\s*$')


def setup_logging():
    """
    Initialize logging module.

    Set the logging level to INFO and format each log entry as
    '%(asctime)s - %(levelname)s - %(message)s'.
    """
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )


def parse_dimensions(value: str) -> tuple[int, int]:
    """
    argparse type for pixel dimensions given as 'WIDTHxHEIGHT', e.g. '3000x2000'.
    """
    match = DIMENSIONS_PATTERN.match(value)
    if not match:
        raise argparse.ArgumentTypeError(
            f"{_('Invalid dimensions, expected WIDTHxHEIGHT')}: {value}")

    width, height = int(match.group(1)), int(match.group(2))
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(
            f"{_('Width and height must be positive')}: {value}")
    return width, height


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    --lang is only validated here. The language itself is picked from sys.argv
    when i18n is first imported (see i18n.detect_language_from_args), because
    translated strings are bound at import time.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.paths and not args.size:
        parser.error(_('Specify at least one image path or --size WIDTHxHEIGHT'))

    return args


def create_parser() -> argparse.ArgumentParser:
    """
    Создает и настраивает парсер аргументов с текущими переводами.
    """
    parser = argparse.ArgumentParser(
        description=_('Standard print size calculator'),
        formatter_class=argparse.RawTextHelpFormatter,
        epilog=format_dpi_help()
    )

    parser.add_argument(
        'paths',
        nargs='*',
        help=_('Paths to image files/directories for analysis')
    )

    parser.add_argument(
        '-s', '--size',
        type=parse_dimensions,
        action='append',
        default=[],
        metavar='WxH',
        help=_('Pixel dimensions to analyse without an image file, e.g. 3000x2000\n') +
             _('(can be repeated)')
    )

    parser.add_argument(
        '--lang',
        choices=['en', 'ru', 'auto'],
        default='auto',
        help=_('Interface language (default: auto)')
    )

    parser.add_argument(
        '-o', '--csv-output',
        action='store_true',
        help=_('Export results to CSV')
    )

    parser.add_argument(
        '-j', '--json-output',
        action='store_true',
        help=_('Export results to JSON')
    )

    return parser


def format_dpi_help() -> str:
    """
    Return a string describing the DPI quality tiers.
    """
    tiers = [
        f"{dpi:>4} DPI  {PRINT_QUALITY_INFO[DPI_QUALITY[dpi]]}"
        for dpi in DPI_LEVELS
    ]
    return _("DPI (Dots Per Inch) indicates print quality") + ":\n" + "\n".join(tiers)


def validate_paths(paths: list[str]) -> list[str]:
    """
    Validate paths and return a list of valid paths with supported extensions.
    """
    valid_paths = []
    invalid_paths = []

    for path in paths:
        if os.path.isfile(path):
            if os.path.splitext(path)[1].lower() in SUPPORTED_EXTENSIONS:
                valid_paths.append(path)
            else:
                logging.warning("Unsupported file extension: %s", path)
                invalid_paths.append(path)
        elif os.path.isdir(path):
            dir_files = collect_files_from_dir(path)
            if not dir_files:
                logging.warning("No files with supported extensions found in directory %s", path)
                invalid_paths.append(path)
            valid_paths.extend(dir_files)
        else:
            logging.warning("Invalid path: %s", path)
            invalid_paths.append(path)

    if not valid_paths:
        error_message = _("No valid files with supported extensions found.")
        if invalid_paths:
            error_message += " " + _("Check the following paths") + ": " + ", ".join(invalid_paths)
        logging.error(error_message)
        raise ValueError(error_message)

    return valid_paths


def collect_files_from_dir(directory: str) -> list[str]:
    """
    Recursively collects and returns a sorted list of file paths with supported
    extensions from the specified directory.
    """
    collected = []
    try:
        for root, _dirs, files in os.walk(directory):
            for f in files:
                if os.path.splitext(f)[1].lower() in SUPPORTED_EXTENSIONS:
                    collected.append(os.path.join(root, f))
    except OSError as e:
        logging.error("Error walking directory %s: %s", directory, str(e))
    return sorted(collected)
