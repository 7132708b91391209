"""
Output renderers for parameter listings.

Records arrive already redacted, so none of the renderers needs to know
which values are secret.
"""

import csv
import json
import sys
from enum import Enum
from typing import Callable, Dict, List, Optional, TextIO

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..errors import EncodingError
from ..ssm.lister import ParameterRecord

__all__ = [
    'OutputFormat',
    'TABLE_HEADER',
    'select_format',
    'render',
    'render_table',
    'render_csv',
    'render_json',
]

TABLE_HEADER = ["Name", "Value", "Type", "LastModifiedDate"]
PIPED_WIDTH = 4096


class OutputFormat(Enum):
    TABLE = "table"
    CSV = "csv"
    JSON = "json"


def select_format(csv_flag: bool = False, json_flag: bool = False) -> OutputFormat:
    """
    Pick the output format from the command line flags.

    CSV wins over JSON; the table is the default.
    """
    if csv_flag:
        return OutputFormat.CSV
    if json_flag:
        return OutputFormat.JSON
    return OutputFormat.TABLE


def render_table(records: List[ParameterRecord], stream: TextIO,
                 width: Optional[int] = None) -> None:
    """
    Write the records as an ASCII box table with a header row.

    Args:
        records: Records to render
        stream: Output stream
        width: Console width; the terminal width if None, unbounded when
            not writing to a terminal
    """
    table = Table(box=box.ASCII, show_header=True, header_style="bold")
    for column in TABLE_HEADER:
        table.add_column(column)
    for record in records:
        # Text cells keep values like "[red]" from being read as markup
        table.add_row(*(Text(cell) for cell in record.as_row()))

    console = Console(file=stream, width=width, highlight=False)
    if width is None and not console.is_terminal:
        # Piped output is never wrapped at 80 columns
        console.width = PIPED_WIDTH
    console.print(table)


def render_csv(records: List[ParameterRecord], stream: TextIO) -> None:
    """
    Write one CSV line per record.

    No header row is written.
    """
    writer = csv.writer(stream, lineterminator="\n")
    try:
        for record in records:
            writer.writerow(record.as_row())
    except csv.Error as e:
        raise EncodingError(f"CSV write error: {e}") from e


def render_json(records: List[ParameterRecord], stream: TextIO) -> None:
    """Write the records as a single compact JSON document."""
    document = {"parameters": [record.as_dict() for record in records]}
    try:
        encoded = json.dumps(document, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        raise EncodingError(f"JSON marshal error: {e}") from e
    stream.write(encoded + "\n")


_RENDERERS: Dict[OutputFormat, Callable[[List[ParameterRecord], TextIO], None]] = {
    OutputFormat.TABLE: render_table,
    OutputFormat.CSV: render_csv,
    OutputFormat.JSON: render_json,
}


def render(records: List[ParameterRecord], fmt: OutputFormat = OutputFormat.TABLE,
           stream: Optional[TextIO] = None) -> None:
    """
    Render a parameter listing.

    Args:
        records: Records to render, in display order
        fmt: Output format
        stream: Output stream (default: standard output)
    """
    _RENDERERS[fmt](records, stream if stream is not None else sys.stdout)
