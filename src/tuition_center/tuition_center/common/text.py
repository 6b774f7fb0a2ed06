from __future__ import annotations

import re
import unicodedata

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")
_WHITESPACE = re.compile(r"\s+")


def _strip_diacritics(value: str) -> str:
    # 'đ'/'Đ' carry no combining mark under NFD, so they are mapped explicitly.
    decomposed = unicodedata.normalize("NFD", value)
    stripped = _COMBINING_MARKS.sub("", decomposed)
    stripped = stripped.replace("đ", "d").replace("Đ", "D")
    return unicodedata.normalize("NFC", stripped)


def normalize_compact(name: str) -> str:
    """Unaccented name with all whitespace removed.

    Used for transfer references (VietQR ``addInfo``), e.g.
    ``"Nguyễn Văn Đức" -> "NguyenVanDuc"``.
    """
    return _WHITESPACE.sub("", _strip_diacritics(name or ""))


def normalize_uppercase_spaced(name: str) -> str:
    """Unaccented, upper-cased name with spacing preserved.

    Used for the bank account holder field, e.g.
    ``"Nguyễn Văn Đức" -> "NGUYEN VAN DUC"``.
    """
    # Upper-case first: some letters only gain a combining mark when upper-cased.
    return _strip_diacritics((name or "").upper())
