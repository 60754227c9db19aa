# utils/reporting.py
from ..i18n import _

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..config import (
    DPI_LEVELS,
    DPI_QUALITY,
    ORIENTATION_DESCRIPTIONS,
    PRINT_QUALITY_DESCRIPTIONS,
    PRINT_QUALITY_INFO,
    RICH_STYLES,
)
from ..core.advisor import PrintSizeReport

console = Console()


def format_sizes(sizes: tuple[str, ...]) -> str:
    """Joins recommended sizes for a single table cell or CSV column."""
    return ", ".join(sizes)


class ConsoleReporter:
    @staticmethod
    def print_image_header(source: str, report: PrintSizeReport) -> None:
        """
        Выводит заголовок с именем файла и параметрами изображения.
        """
        details = Text()
        details.append(source, style=RICH_STYLES['filename'])
        details.append(f"\n{_('Dimensions')}: ", style=RICH_STYLES['label'])
        details.append(f"{report.metrics.width_px} × {report.metrics.height_px} px")
        details.append(f"\n{_('Orientation')}: ", style=RICH_STYLES['label'])
        details.append(ORIENTATION_DESCRIPTIONS[report.orientation])
        details.append(f"\n{_('Aspect Ratio')}: ", style=RICH_STYLES['label'])
        details.append(f"{report.classification.display_aspect_ratio}")

        console.print()
        console.print(Panel(
            details,
            title=_("Image Analysis"),
            border_style=RICH_STYLES['header'],
            expand=False
        ))

    @staticmethod
    def print_sizes_table(report: PrintSizeReport) -> None:
        """
        Выводит таблицу рекомендуемых размеров печати по уровням DPI.

        Args:
            report: Результат анализа изображения
        """
        table = Table(show_header=True, header_style="bold", title=_("Optimal Print Sizes"))

        table.add_column(_("Quality"), style="bold")
        table.add_column("DPI")
        table.add_column(_("Recommended Sizes (inches)"))

        for dpi in DPI_LEVELS:
            quality = DPI_QUALITY[dpi]
            style = RICH_STYLES[quality]
            sizes = report.recommendations[dpi]

            if sizes:
                sizes_text = Text(format_sizes(sizes), style=style)
            else:
                sizes_text = Text(_("No standard sizes match"), style=RICH_STYLES['empty'])

            table.add_row(
                Text(PRINT_QUALITY_DESCRIPTIONS[quality], style=style),
                f"{dpi} DPI",
                sizes_text
            )

        console.print(table)

    @staticmethod
    def print_dpi_legend() -> None:
        """Prints what each DPI tier means for the print."""
        legend = Text(_("DPI (Dots Per Inch) indicates print quality") + ":")
        for dpi in DPI_LEVELS:
            quality = DPI_QUALITY[dpi]
            legend.append("\n  • ")
            legend.append(f"{dpi} DPI", style=RICH_STYLES[quality])
            legend.append(f": {PRINT_QUALITY_INFO[quality]}")
        console.print(legend, style=RICH_STYLES['label'])
