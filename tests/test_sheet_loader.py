from __future__ import annotations

import pytest
import requests

from config.settings import OrgChartSettings
from services.sheet_loader import SheetLoadError, fetch_csv_text, load_rows, parse_csv_rows


class FakeResponse:
    def __init__(self, text: str = "", status_code: int = 200, reason: str = "OK"):
        self.text = text
        self.status_code = status_code
        self.reason = reason

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400


class FakeSession:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if self.exc is not None:
            raise self.exc
        return self.response


# ---------- parsing ----------

def test_parse_quoted_fields() -> None:
    text = 'Name,Title,Manager\nAnn,"Head, Ops",\nBob,Dev,Ann\n'
    assert parse_csv_rows(text) == [
        {"Name": "Ann", "Title": "Head, Ops", "Manager": ""},
        {"Name": "Bob", "Title": "Dev", "Manager": "Ann"},
    ]


def test_parse_trims_headers_and_values() -> None:
    rows = parse_csv_rows(" Name , Title \n Ann , CEO \n")
    assert rows == [{"Name": "Ann", "Title": "CEO"}]


def test_parse_skips_lines_with_extra_fields() -> None:
    rows = parse_csv_rows("Name,Title\nAnn,CEO\nBob,Dev,extra\nCid,Ops\n")
    assert [r["Name"] for r in rows] == ["Ann", "Cid"]


def test_parse_ignores_blank_lines() -> None:
    rows = parse_csv_rows("Name,Title\n\nAnn,CEO\n\n")
    assert rows == [{"Name": "Ann", "Title": "CEO"}]


@pytest.mark.parametrize("text", ["", "   \n", "Name,Title\n"])
def test_parse_without_data_lines(text) -> None:
    assert parse_csv_rows(text) == []


# ---------- fetching ----------

def test_fetch_returns_body() -> None:
    session = FakeSession(FakeResponse("Name\nAnn\n"))
    assert fetch_csv_text("http://sheet/csv", timeout=3, session=session) == "Name\nAnn\n"
    assert session.calls == [("http://sheet/csv", 3)]


def test_fetch_http_error_message() -> None:
    session = FakeSession(FakeResponse(status_code=404, reason="Not Found"))
    with pytest.raises(SheetLoadError, match="Failed to fetch data: 404 Not Found"):
        fetch_csv_text("http://sheet/csv", session=session)


def test_fetch_network_error_is_wrapped() -> None:
    session = FakeSession(exc=requests.ConnectionError("boom"))
    with pytest.raises(SheetLoadError, match="Failed to fetch data"):
        fetch_csv_text("http://sheet/csv", session=session)


def test_fetch_requires_url() -> None:
    with pytest.raises(SheetLoadError):
        fetch_csv_text("")


def test_fetch_uses_requests_get_by_default(monkeypatch) -> None:
    calls = []

    def fake_get(url, timeout=None):
        calls.append(url)
        return FakeResponse("Name\nAnn\n")

    monkeypatch.setattr(requests, "get", fake_get)
    assert fetch_csv_text("http://sheet/csv") == "Name\nAnn\n"
    assert calls == ["http://sheet/csv"]


# ---------- load_rows ----------

def test_load_rows_demo_when_no_url() -> None:
    rows = load_rows(OrgChartSettings())
    assert len(rows) == 21
    assert rows[0]["Name"] == "Catherine"


def test_load_rows_from_sheet() -> None:
    session = FakeSession(FakeResponse("Name,Manager\nAnn,\nBob,Ann\n"))
    rows = load_rows(OrgChartSettings(sheet_url="http://sheet/csv"), session=session)
    assert [r["Name"] for r in rows] == ["Ann", "Bob"]


def test_load_rows_empty_sheet_is_an_error() -> None:
    session = FakeSession(FakeResponse("Name,Manager\n"))
    with pytest.raises(SheetLoadError, match="No data found"):
        load_rows(OrgChartSettings(sheet_url="http://sheet/csv"), session=session)
