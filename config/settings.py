# config/settings.py
import os
from dataclasses import dataclass, fields
from typing import Any
from dotenv import load_dotenv

load_dotenv()

GROUPING_MODES = ("tree", "subdepartment", "department")

# ---------- helpers ----------

def _get_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None or str(val).strip() == "":
        return default
    s = str(val).strip().lower()
    if s in {"1", "true", "yes", "y", "on"}:
        return True
    if s in {"0", "false", "no", "n", "off"}:
        return False
    raise ValueError(f"{name}={val!r} is not a boolean")

def _get_int(name: str, default: int, min_v: int | None = None, max_v: int | None = None) -> int:
    raw = os.getenv(name)
    v = int(raw) if raw not in (None, "") else default
    if min_v is not None and v < min_v:
        raise ValueError(f"{name}={v} < min {min_v}")
    if max_v is not None and v > max_v:
        raise ValueError(f"{name}={v} > max {max_v}")
    return v

def _get_float(name: str, default: float, min_v: float | None = None, max_v: float | None = None) -> float:
    raw = os.getenv(name)
    v = float(raw) if raw not in (None, "") else default
    if min_v is not None and v < min_v:
        raise ValueError(f"{name}={v} < min {min_v}")
    if max_v is not None and v > max_v:
        raise ValueError(f"{name}={v} > max {max_v}")
    return v


# ---------- settings ----------

@dataclass(frozen=True)
class OrgChartSettings:
    sheet_url: str = ""
    fetch_timeout: float = 15.0
    cache_ttl: int = 180
    grouping_mode: str = "tree"
    strict_names: bool = False
    role_rules_path: str = ""
    chart_height: int = 720
    use_demo_data: bool = False

    @property
    def demo_mode(self) -> bool:
        return self.use_demo_data or not self.sheet_url


def load_settings(**overrides: Any) -> OrgChartSettings:
    """Read ORG_* environment variables; keyword overrides win."""
    known = {f.name for f in fields(OrgChartSettings)}
    unknown = set(overrides) - known
    if unknown:
        raise TypeError(f"Unknown setting(s): {', '.join(sorted(unknown))}")

    values: dict[str, Any] = {
        "sheet_url": os.getenv("ORG_SHEET_URL", "").strip(),
        "fetch_timeout": _get_float("ORG_FETCH_TIMEOUT", 15.0, min_v=1.0, max_v=120.0),
        "cache_ttl": _get_int("ORG_CACHE_TTL", 180, min_v=0, max_v=86400),
        "grouping_mode": os.getenv("ORG_GROUPING_MODE", "tree").strip().lower() or "tree",
        "strict_names": _get_bool("ORG_STRICT_NAMES", False),
        "role_rules_path": os.getenv("ORG_ROLE_RULES_PATH", "").strip(),
        "chart_height": _get_int("ORG_CHART_HEIGHT", 720, min_v=200, max_v=4000),
        "use_demo_data": _get_bool("ORG_USE_DEMO_DATA", False),
    }
    values.update(overrides)

    if values["grouping_mode"] not in GROUPING_MODES:
        raise ValueError(f"ORG_GROUPING_MODE={values['grouping_mode']!r}; expected one of {GROUPING_MODES}")
    return OrgChartSettings(**values)
