# core/image_analyzer.py
import logging
import os
from typing import Optional

from tqdm import tqdm

from print_size_suggester.utils.reporters import IReporter
from .advisor import PrintSizeReport, suggest_print_sizes
from .image_loader import load_image_size
from .orientation import InvalidDimensions
from ..utils.reporting import ConsoleReporter


class ImageAnalyzer:
    """
    Класс, инкапсулирующий логику анализа изображений.
    Предоставляет методы для анализа отдельных файлов, групп файлов
    и размеров, заданных вручную.
    """

    def __init__(self, reporters: list[IReporter] = None, console_output: bool = True):
        """
        Args:
            reporters: Список объектов для отчетности (CSV, JSON и т.д.)
            console_output: Выводить ли результаты в консоль
        """
        self.reporters = reporters or []
        self.console_output = console_output

    def analyze_files(self, files: list[str]) -> list[PrintSizeReport]:
        """
        Анализирует список файлов. Файлы, которые не удалось прочитать, пропускаются.
        """
        reports = []
        for file_path in tqdm(files, desc="Processing files", leave=False):
            report = self.analyze_file(file_path)
            if report is not None:
                self._report_results(os.path.basename(file_path), report)
                reports.append(report)
        return reports

    def analyze_file(self, file_path: str) -> Optional[PrintSizeReport]:
        """
        Анализирует одно изображение.

        Returns:
            PrintSizeReport или None в случае ошибки
        """
        load_result = load_image_size(file_path)
        if load_result.error:
            logging.error("Error loading image %s: %s", file_path, load_result.error)
            return None

        try:
            return suggest_print_sizes(load_result.width, load_result.height)
        except InvalidDimensions as e:
            logging.error("Skipping %s: %s", file_path, e)
            return None

    def analyze_dimensions(self, width: int, height: int) -> PrintSizeReport:
        """
        Анализирует размеры в пикселях без файла изображения.

        Raises:
            InvalidDimensions: if width or height is not a positive integer.
        """
        report = suggest_print_sizes(width, height)
        self._report_results(f"{width}x{height}", report)
        return report

    def _report_results(self, source: str, report: PrintSizeReport) -> None:
        """Выводит и сохраняет результаты анализа."""
        if self.console_output:
            ConsoleReporter.print_image_header(source, report)
            ConsoleReporter.print_sizes_table(report)

        for rep in self.reporters:
            rep.write_report(source, report)
