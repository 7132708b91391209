"""
Table, CSV and JSON rendering of parameter listings.
"""

from .renderers import (
    OutputFormat,
    TABLE_HEADER,
    select_format,
    render,
    render_table,
    render_csv,
    render_json,
)
