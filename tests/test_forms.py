"""Tests for multipart payload construction."""

import io
import json
from datetime import date, datetime, timedelta, timezone
from pathlib import Path

import httpx
import pytest

from timberpy import Environment
from timberpy.exceptions import TimberFormDataError
from timberpy.forms import (
    BrowserFormPayload,
    ServerFormPayload,
    append_indexed,
    format_timestamp,
    get_form_data,
    serialize_form_value,
)
from timberpy.models import TemplateEntry


def encode(form, parse_form):
    """Build the request httpx would send for a payload and decode it."""
    request = httpx.Request(
        "POST",
        "https://api.timber.me/upload",
        headers=form.headers,
        **form.request_kwargs(),
    )
    request.read()
    return request, parse_form(request)


class TestGetFormData:
    """Test payload selection."""

    def test_server_payload(self):
        """Test that server runtimes get a payload declaring its boundary."""
        form = get_form_data(Environment.SERVER)
        form.append("name", "value")
        assert isinstance(form, ServerFormPayload)
        assert form.headers == {
            "Content-Type": f"multipart/form-data; boundary={form.boundary}"
        }

    def test_empty_server_payload_declares_nothing(self):
        """Test that a payload without fields sets no Content-Type."""
        assert ServerFormPayload().headers == {}

    def test_browser_payload(self):
        """Test that browser runtimes leave the header to the transport."""
        form = get_form_data(Environment.BROWSER)
        assert isinstance(form, BrowserFormPayload)
        assert form.headers == {}

    def test_detects_environment_when_omitted(self):
        """Test that a payload is produced without an explicit environment."""
        assert isinstance(get_form_data(), (ServerFormPayload, BrowserFormPayload))

    def test_fresh_payload_per_call(self):
        """Test that payloads are never shared between requests."""
        first = get_form_data(Environment.SERVER)
        second = get_form_data(Environment.SERVER)
        first.append("name", "a")
        assert len(second) == 0
        assert first.boundary != second.boundary

    def test_unknown_environment_fails(self):
        """Test that an unsupported runtime fails instead of falling back."""
        with pytest.raises(TimberFormDataError):
            get_form_data("desktop")  # type: ignore[arg-type]


class TestEncoding:
    """Test that both payloads encode the same fields."""

    @pytest.mark.parametrize("environment", list(Environment))
    def test_fields_reach_the_wire(self, environment, parse_form):
        """Test text and file fields for every runtime."""
        form = get_form_data(environment)
        form.append("title", "April")
        form.append("file", io.BytesIO(b"%PDF-1.4 data"))

        request, parts = encode(form, parse_form)

        assert request.headers["Content-Type"].startswith("multipart/form-data; boundary=")
        assert parts[0] == ("title", None, b"April")
        assert parts[1][0] == "file"
        assert parts[1][2] == b"%PDF-1.4 data"

    def test_server_boundary_is_used_on_the_wire(self, parse_form):
        """Test that httpx encodes with the boundary the payload announced."""
        form = ServerFormPayload()
        form.append("name", "value")

        request, _ = encode(form, parse_form)

        assert request.headers["Content-Type"] == form.headers["Content-Type"]
        assert f"--{form.boundary}".encode() in request.content

    def test_file_name_from_handle(self, parse_form, tmp_path: Path):
        """Test that open files keep their base name."""
        receipt = tmp_path / "receipt.png"
        receipt.write_bytes(b"\x89PNG")
        form = ServerFormPayload()

        with receipt.open("rb") as handle:
            form.append("file", handle)
            _, parts = encode(form, parse_form)

        assert parts == [("file", "receipt.png", b"\x89PNG")]

    def test_path_is_read(self, parse_form, tmp_path: Path):
        """Test that a Path is uploaded with its contents."""
        statement = tmp_path / "statement.csv"
        statement.write_bytes(b"date,amount;2025-04-01,10")
        form = ServerFormPayload()
        form.append("file", statement)

        _, parts = encode(form, parse_form)

        assert parts == [("file", "statement.csv", b"date,amount;2025-04-01,10")]

    def test_missing_path_raises(self, tmp_path: Path):
        """Test that a missing file is reported before sending."""
        form = ServerFormPayload()
        with pytest.raises(FileNotFoundError):
            form.append("file", tmp_path / "nope.pdf")

    def test_bytes_use_field_name(self, parse_form):
        """Test that raw bytes are named after the field."""
        form = ServerFormPayload()
        form.append("logo", b"\x00\x01")

        _, parts = encode(form, parse_form)

        assert parts == [("logo", "logo", b"\x00\x01")]

    def test_string_reference_is_text(self, parse_form):
        """Test that a string file reference is sent as a plain field."""
        form = ServerFormPayload()
        form.append("license", "https://example.com/license.png")

        _, parts = encode(form, parse_form)

        assert parts == [("license", None, b"https://example.com/license.png")]

    def test_indexed_fields(self, parse_form):
        """Test array-of-scalar encoding."""
        form = ServerFormPayload()
        append_indexed(form, "sector", ["product", "service"])

        _, parts = encode(form, parse_form)

        assert parts == [
            ("sector[0]", None, b"product"),
            ("sector[1]", None, b"service"),
        ]


class TestSerializeFormValue:
    """Test scalar and structured value serialization."""

    def test_aware_datetime_is_normalized_to_utc(self):
        """Test timezone normalization and millisecond precision."""
        dubai = timezone(timedelta(hours=4))
        value = datetime(2025, 4, 1, 13, 30, 15, 123456, tzinfo=dubai)
        assert serialize_form_value(value) == "2025-04-01T09:30:15.123Z"

    def test_date_is_midnight_utc(self):
        """Test that plain dates are sent as midnight UTC."""
        assert format_timestamp(date(2025, 4, 1)) == "2025-04-01T00:00:00.000Z"

    def test_booleans(self):
        """Test lower-case booleans."""
        assert serialize_form_value(True) == "true"
        assert serialize_form_value(False) == "false"

    def test_numbers(self):
        """Test that numbers use their text form."""
        assert serialize_form_value(1050) == "1050"
        assert serialize_form_value(12.5) == "12.5"

    def test_structures_round_trip_as_json(self):
        """Test that nested structures decode back to the input."""
        value = [{"id": "1", "title": "Consulting", "rate": 500, "tags": ["a", "b"]}]
        assert json.loads(serialize_form_value(value)) == value

    def test_models_are_json(self):
        """Test that pydantic models are dumped without unset fields."""
        entry = TemplateEntry(name="Terms", content="Net 30")
        assert serialize_form_value(entry) == '{"name":"Terms","content":"Net 30"}'
