from datetime import datetime, timezone
from typing import Any, List, Optional


def parse_int(value: Any, default: Optional[int] = None) -> Optional[int]:
    try:
        if value is None or value == "":
            return default
        return int(float(value))
    except Exception:
        return default


def parse_float(value: Any, default: Optional[float] = None) -> Optional[float]:
    try:
        if value is None or value == "":
            return default
        return float(value)
    except Exception:
        return default


def parse_csv(value: Any, default: Optional[List[str]] = None) -> List[str]:
    if value is None:
        return list(default or [])
    items = [part.strip() for part in str(value).split(",")]
    items = [part for part in items if part]
    return items or list(default or [])


def normalize_symbol(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip().upper()


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()
