# services/sheet_loader.py
from __future__ import annotations
import io
from typing import Dict, List, Optional

import pandas as pd
import requests

from config.settings import OrgChartSettings
from features.orgchart.demo_data import DEMO_ROWS
from utils.logger import get_logger

logger = get_logger("sheet_loader")

Row = Dict[str, str]


class SheetLoadError(RuntimeError):
    """Human-readable failure to get rows from the sheet."""


def fetch_csv_text(url: str, timeout: float = 15.0, session: Optional[requests.Session] = None) -> str:
    if not url:
        raise SheetLoadError("Please configure ORG_SHEET_URL with your spreadsheet CSV export URL")
    http = session or requests
    logger.info("Fetching sheet CSV: %s", url)
    try:
        resp = http.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise SheetLoadError(f"Failed to fetch data: {e}") from e
    if not resp.ok:
        raise SheetLoadError(f"Failed to fetch data: {resp.status_code} {resp.reason}")
    return resp.text


def parse_csv_rows(text: str) -> List[Row]:
    """
    CSV text -> list of {header: value}, all strings, trimmed. Lines with
    more fields than the header are dropped; short lines are padded with "".
    """
    if not (text or "").strip():
        return []
    skipped: List[List[str]] = []

    def _bad_line(fields: List[str]) -> None:
        skipped.append(fields)
        return None

    try:
        df = pd.read_csv(
            io.StringIO(text),
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            engine="python",
            on_bad_lines=_bad_line,
        )
    except pd.errors.EmptyDataError:
        return []

    if skipped:
        logger.warning("Skipped %d malformed CSV line(s)", len(skipped))
    df.columns = [str(c).strip() for c in df.columns]
    for c in df.columns:
        df[c] = df[c].fillna("").astype(str).str.strip()
    return df.to_dict(orient="records")


def load_rows(settings: OrgChartSettings, session: Optional[requests.Session] = None) -> List[Row]:
    if settings.demo_mode:
        logger.info("Using demo data (no sheet URL configured)")
        return [dict(r) for r in DEMO_ROWS]
    rows = parse_csv_rows(fetch_csv_text(settings.sheet_url, settings.fetch_timeout, session=session))
    if not rows:
        raise SheetLoadError("No data found in the spreadsheet")
    logger.info("Loaded %d row(s) from sheet", len(rows))
    return rows
