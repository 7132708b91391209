"""
Tests for the output renderers.
"""

import csv
import io
import json
import pytest
from pstore.errors import EncodingError
from pstore.output.renderers import (
    OutputFormat,
    TABLE_HEADER,
    render,
    render_csv,
    render_json,
    render_table,
    select_format,
)
from pstore.ssm.lister import REDACTED_VALUE, ParameterRecord

RECORDS = [
    ParameterRecord("app/host", "a.example.com,b.example.com", "StringList", "2023-05-15 19:30:00"),
    ParameterRecord("db_password", REDACTED_VALUE, "SecureString", "2023-05-16 08:00:00"),
    ParameterRecord("motd", 'say "hi"\n[bold]', "String", "2023-05-17 12:15:30"),
]


def _table_header(output):
    """Parse the first table row back into cell texts."""
    line = next(l for l in output.splitlines() if l.startswith("|"))
    return [cell.strip() for cell in line.strip().strip("|").split("|")]


def test_select_format():
    """Test output format precedence."""
    assert select_format() == OutputFormat.TABLE
    assert select_format(csv_flag=True) == OutputFormat.CSV
    assert select_format(json_flag=True) == OutputFormat.JSON
    # CSV wins when both are set
    assert select_format(csv_flag=True, json_flag=True) == OutputFormat.CSV


def test_render_table_header():
    """Test that the table header parses back to the column names."""
    stream = io.StringIO()
    render_table(RECORDS[:2], stream, width=120)

    assert _table_header(stream.getvalue()) == TABLE_HEADER
    assert _table_header(stream.getvalue()) == ["Name", "Value", "Type", "LastModifiedDate"]


def test_render_table_empty():
    """Test that an empty listing still shows the header."""
    stream = io.StringIO()
    render_table([], stream, width=120)

    assert _table_header(stream.getvalue()) == TABLE_HEADER


def test_render_table_rows():
    """Test that every record appears in the table, values taken literally."""
    stream = io.StringIO()
    render_table(RECORDS, stream, width=160)
    output = stream.getvalue()

    assert "db_password" in output
    assert REDACTED_VALUE in output
    assert "a.example.com,b.example.com" in output
    assert "[bold]" in output
    assert "\x1b[" not in output


def test_render_csv():
    """Test CSV output: no header, standard quoting."""
    stream = io.StringIO()
    render_csv(RECORDS, stream)

    rows = list(csv.reader(io.StringIO(stream.getvalue())))
    assert rows == [r.as_row() for r in RECORDS]
    assert stream.getvalue().startswith("app/host,")
    assert '"a.example.com,b.example.com"' in stream.getvalue()
    # Ends with the last row, no trailing blank line
    assert not stream.getvalue().endswith("\n\n")


def test_render_json():
    """Test the JSON document layout."""
    stream = io.StringIO()
    render_json(RECORDS, stream)

    document = json.loads(stream.getvalue())
    assert list(document) == ["parameters"]
    assert document["parameters"][1] == {
        "name": "db_password",
        "value": REDACTED_VALUE,
        "type": "SecureString",
        "last_modified_date": "2023-05-16 08:00:00",
    }
    # A single compact document
    assert stream.getvalue().count("\n") == 1


def test_render_json_empty():
    """Test JSON output for an empty listing."""
    stream = io.StringIO()
    render_json([], stream)

    assert json.loads(stream.getvalue()) == {"parameters": []}


def test_csv_and_json_agree():
    """Test that CSV and JSON carry the same names, types and values."""
    csv_stream = io.StringIO()
    json_stream = io.StringIO()
    render(RECORDS, OutputFormat.CSV, csv_stream)
    render(RECORDS, OutputFormat.JSON, json_stream)

    from_csv = {(row[0], row[2], row[1]) for row in csv.reader(io.StringIO(csv_stream.getvalue()))}
    from_json = {
        (p["name"], p["type"], p["value"]) for p in json.loads(json_stream.getvalue())["parameters"]
    }
    assert from_csv == from_json


def test_render_defaults_to_stdout(capsys):
    """Test that render writes to standard output by default."""
    render(RECORDS, OutputFormat.JSON)

    captured = capsys.readouterr()
    assert json.loads(captured.out)["parameters"][0]["name"] == "app/host"


def test_render_json_encoding_error():
    """Test that unserialisable values raise EncodingError."""
    record = ParameterRecord("bad", object(), "String", "")

    with pytest.raises(EncodingError):
        render_json([record], io.StringIO())
