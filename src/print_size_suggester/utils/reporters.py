# utils/reporters.py
import csv
import json
import os
from abc import ABC, abstractmethod
from datetime import datetime

from ..config import CSV_SEPARATOR, DPI_QUALITY, LOGS_DIR, get_output_csv_header
from ..core.advisor import PrintSizeReport
from .reporting import format_sizes


class IReporter(ABC):
    """
    Basic reporter interface. Provides a unified write_report() method,
    as well as a context manager (when necessary).
    """
    @abstractmethod
    def write_report(self, source: str, report: PrintSizeReport) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        pass


def get_log_filename(extension: str) -> str:
    """
    Generates a report file name with a timestamp, e.g. print_sizes_20240101_120000.csv
    """
    parts = [
        "print_sizes",
        datetime.now().strftime("%Y%m%d_%H%M%S"),
    ]
    output_filename = "_".join(parts) + f".{extension}"

    return os.path.join(LOGS_DIR, output_filename)


def get_csv_log_filename() -> str:
    return get_log_filename("csv")


def get_json_log_filename() -> str:
    return get_log_filename("json")


class CSVReporter(IReporter):
    """
    Recording results in a CSV file, one row per image and DPI level.
    """
    def __init__(self, output_path: str):
        self.output_path = output_path
        self.file = None
        self.writer = None

    def __enter__(self):
        os.makedirs(os.path.dirname(self.output_path) or ".", exist_ok=True)
        self.file = open(self.output_path, 'w', newline='', encoding='utf-8')
        self.writer = csv.writer(self.file, delimiter=CSV_SEPARATOR)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.file:
            self.file.close()

    def write_header(self) -> None:
        """
        Writes the title (first line).
        """
        self.writer.writerow(get_output_csv_header())

    def write_report(self, source: str, report: PrintSizeReport) -> None:
        """
        Writes results to CSV. Image columns are filled only on the first row.
        """
        for i, (dpi, sizes) in enumerate(report.recommendations.items()):
            if i == 0:
                row = [
                    source,
                    f"{report.metrics.width_px}x{report.metrics.height_px}",
                    report.orientation.value,
                    f"{report.classification.display_aspect_ratio:.2f}",
                ]
            else:
                row = [""] * 4

            row.extend([dpi, DPI_QUALITY[dpi].value, format_sizes(sizes)])
            self.writer.writerow(row)


class JSONReporter(IReporter):
    """
    Report in JSON format. Similar to CSVReporter.
    When exiting the context (exit), saves the accumulated results.
    """

    def __init__(self, output_path: str):
        self.output_path = output_path
        self.file = None
        self.data = []

    def __enter__(self):
        os.makedirs(os.path.dirname(self.output_path) or ".", exist_ok=True)
        self.file = open(self.output_path, "w", encoding="utf-8")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.file is not None:
            json.dump(self.data, self.file, ensure_ascii=False, indent=2)
            self.file.close()

    def write_report(self, source: str, report: PrintSizeReport) -> None:
        self.data.append({"file": source, **report.to_dict()})
