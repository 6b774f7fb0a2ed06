import pytest

from src.tuition_center.tuition_center.common.text import normalize_compact, normalize_uppercase_spaced


def test_compact_strips_accents_and_spaces():
    assert normalize_compact("Nguyễn Văn Đức") == "NguyenVanDuc"


def test_uppercase_keeps_spacing():
    assert normalize_uppercase_spaced("Nguyễn Văn Đức") == "NGUYEN VAN DUC"
    assert normalize_uppercase_spaced("Lê  Minh\tAnh") == "LE  MINH\tANH"


def test_lowercase_d_with_stroke_is_mapped():
    assert normalize_compact("đoàn đức") == "doanduc"
    assert normalize_uppercase_spaced("đoàn đức") == "DOAN DUC"


@pytest.mark.parametrize("name", ["Nguyễn Văn Đức", "Trần Thị Hoa", "  Phạm   Ngọc Ánh ", "ガ ク", ""])
def test_normalizers_are_idempotent(name):
    once = normalize_compact(name)
    assert normalize_compact(once) == once

    once = normalize_uppercase_spaced(name)
    assert normalize_uppercase_spaced(once) == once


def test_non_latin_passes_through():
    assert normalize_compact("김 민준") == "김민준"
    assert normalize_compact("ガ ク") == "ガク"
    assert normalize_uppercase_spaced("김 민준") == "김 민준"


def test_none_is_treated_as_empty():
    assert normalize_compact(None) == ""
    assert normalize_uppercase_spaced(None) == ""
