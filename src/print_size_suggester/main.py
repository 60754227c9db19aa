# main.py
import sys

if sys.platform == 'win32':
    if sys.stdout.encoding != 'utf-8':
        import codecs
        sys.stdout = codecs.getwriter('utf-8')(sys.stdout.buffer)
        sys.stderr = codecs.getwriter('utf-8')(sys.stderr.buffer)

import argparse
import logging

from .i18n import _

from .core.image_analyzer import ImageAnalyzer
from .utils.cli import parse_arguments, setup_logging, validate_paths
from .utils.reporting import ConsoleReporter
from .utils.reporters import (
    IReporter,
    CSVReporter,
    JSONReporter,
    get_csv_log_filename,
    get_json_log_filename
)


def main(argv: list[str] | None = None) -> None:
    """Основная функция программы."""
    setup_logging()

    args = parse_arguments(argv)

    try:
        files = get_file_list(args.paths, exit_on_error=not args.size) if args.paths else []
        run_analysis(files, args)
    except Exception as e:
        logging.error(f"{_('Unexpected error')}: {str(e)}")
        sys.exit(1)


def get_file_list(paths: list[str], exit_on_error: bool = True) -> list[str]:
    """
    Проверяет пути и возвращает список файлов для обработки.
    Если других источников (--size) нет, при ошибке завершает работу.
    """
    try:
        return validate_paths(paths)
    except ValueError as e:
        if not exit_on_error:
            logging.warning("%s", str(e))
            return []
        logging.error("%s %s", str(e), _("Exiting."))
        sys.exit(1)


def run_analysis(files: list[str], args: argparse.Namespace) -> None:
    """Запускает анализ изображений и размеров с настройкой репортеров."""
    reporters, output_paths = setup_reporters(args)

    try:
        analyzer = ImageAnalyzer(reporters)
        reports = analyzer.analyze_files(files)
        for width, height in args.size:
            reports.append(analyzer.analyze_dimensions(width, height))
    finally:
        close_reporters(reporters)

    if reports:
        ConsoleReporter.print_dpi_legend()

    if 'csv' in output_paths:
        print(f"\n{_('Results (CSV) saved to')}: {output_paths['csv']}")
    if 'json' in output_paths:
        print(f"\n{_('Results (JSON) saved to')}: {output_paths['json']}\n")


def setup_reporters(args: argparse.Namespace) -> tuple[list[IReporter], dict[str, str]]:
    """
    Настраивает репортеры для вывода результатов анализа.
    Уже открытые репортеры закрываются, если следующий не удалось открыть.
    """
    reporters = []
    output_paths = {}

    try:
        if args.csv_output:
            csv_path = get_csv_log_filename()
            csv_reporter = CSVReporter(csv_path)
            csv_reporter.__enter__()
            reporters.append(csv_reporter)
            csv_reporter.write_header()
            output_paths['csv'] = csv_path
            logging.info("CSV output enabled, file: %s", csv_path)

        if args.json_output:
            json_path = get_json_log_filename()
            json_reporter = JSONReporter(json_path)
            json_reporter.__enter__()
            reporters.append(json_reporter)
            output_paths['json'] = json_path
            logging.info("JSON output enabled, file: %s", json_path)
    except OSError:
        close_reporters(reporters)
        raise

    return reporters, output_paths


def close_reporters(reporters: list[IReporter]) -> None:
    """Закрывает все репортеры."""
    for rep in reporters:
        try:
            rep.__exit__(None, None, None)
        except OSError as e:
            logging.error("Error closing reporter: %s", e)


if __name__ == "__main__":
    main()
