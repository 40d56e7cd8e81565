import locale
from typing import Iterable, List, Optional


def normalize_locale(code: str) -> str:
    """'zh_cn.UTF-8' -> 'zh-cn'. Used for comparisons only."""
    return code.split(".")[0].split("@")[0].replace("_", "-").lower()


def negotiate_locale(requested: Optional[str], available: Iterable[str], default: str) -> str:
    """
    Pick the best available locale for a requested one.

    Exact match first (case and separator insensitive), then the first
    available locale sharing the language subtag, otherwise the default.
    """
    available = list(available)
    if not requested:
        return default

    wanted = normalize_locale(requested)
    for code in available:
        if normalize_locale(code) == wanted:
            return code

    language = wanted.split("-")[0]
    for code in available:
        if normalize_locale(code).split("-")[0] == language:
            return code

    return default


def fallback_chain(locale_code: str, default: str) -> List[str]:
    """Most specific locale first, default last, no repeats."""
    if normalize_locale(locale_code) == normalize_locale(default):
        return [locale_code]
    return [locale_code, default]


def detect_system_locale() -> Optional[str]:
    """
    Reads the process locale, e.g. 'zh_CN'.
    Returns None when the locale is unset or 'C'.
    """
    try:
        code, _ = locale.getlocale()
    except ValueError:
        return None
    if not code or code in ("C", "POSIX"):
        return None
    return code
