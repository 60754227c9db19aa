# tests/utils/test_reporters.py
import csv
import json

from print_size_suggester.config import CSV_SEPARATOR
from print_size_suggester.core.advisor import suggest_print_sizes
from print_size_suggester.utils.reporters import CSVReporter, JSONReporter


def test_csv_reporter(tmp_path):
    output_path = tmp_path / "reports" / "test_output.csv"

    with CSVReporter(str(output_path)) as reporter:
        reporter.write_header()
        reporter.write_report("test.png", suggest_print_sizes(3000, 2400))

    assert output_path.exists()
    with open(output_path, newline='', encoding='utf-8') as f:
        rows = list(csv.reader(f, delimiter=CSV_SEPARATOR))

    assert len(rows) == 4
    assert rows[1][:4] == ["test.png", "3000x2400", "landscape", "1.25"]
    assert rows[1][4:] == ["300", "excellent", "10×8"]
    assert rows[2][:4] == ["", "", "", ""]
    assert rows[2][4:] == ["150", "good", "20×16, 14×11, 10×8"]
    assert rows[3][4] == "100"


def test_json_reporter(tmp_path):
    output_path = tmp_path / "test_output.json"

    with JSONReporter(str(output_path)) as reporter:
        reporter.write_report("square.png", suggest_print_sizes(800, 800))
        reporter.write_report("3000x2000", suggest_print_sizes(3000, 2000))

    data = json.loads(output_path.read_text(encoding='utf-8'))

    assert [entry["file"] for entry in data] == ["square.png", "3000x2000"]
    assert data[0]["orientation"] == "square"
    assert data[0]["recommendations"][2] == {"dpi": 100, "quality": "acceptable", "sizes": ["8×8"]}
    assert data[1]["aspect_ratio"] == 1.5
    assert data[1]["recommendations"][0]["sizes"] == []
