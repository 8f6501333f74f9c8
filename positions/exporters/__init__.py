"""Export modules for results."""

from .rows import build_export_rows
from .excel_exporter import build_excel, export_to_excel
from .print_exporter import export_to_print, generate_print_html

__all__ = [
    "build_export_rows",
    "build_excel",
    "export_to_excel",
    "export_to_print",
    "generate_print_html",
]
