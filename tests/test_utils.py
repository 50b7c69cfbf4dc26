import logging
import math

import pytest

from core import Token
from utils import format_result, format_postfix, append_history


@pytest.mark.parametrize("value, expected", [
    (14.0, "14"),
    (0.5, "0.5"),
    (-2.0, "-2"),
    (1 / 3, "0.3333333333"),
    (2.0000000000001, "2"),
    (1234567.0, "1234567"),
    (1e20, "100000000000000000000"),
    (-0.0, "0"),
    (math.nan, "NaN"),
    (math.inf, "∞"),
    (-math.inf, "-∞"),
])
def test_format_result(value, expected):
    assert format_result(value) == expected


def test_format_result_fraction_digits():
    assert format_result(3.14159, max_fraction_digits=2) == "3.14"


def test_format_postfix():
    tokens = [Token.number(2, '2'), Token.number(3, '3'), Token.operator('+')]
    assert format_postfix(tokens) == "2 3 +"


class TestHistory:

    def test_appends_lines(self, tmp_path):
        path = tmp_path / "history"
        assert append_history("1+1", str(path))
        assert append_history("5/0", str(path))
        assert path.read_text(encoding='utf-8') == "1+1\n5/0\n"

    def test_skips_empty(self, tmp_path):
        path = tmp_path / "history"
        assert not append_history("", str(path))
        assert not path.exists()

    def test_unwritable_path_logs_warning(self, tmp_path, caplog):
        path = tmp_path / "missing_dir" / "history"
        with caplog.at_level(logging.WARNING):
            assert not append_history("1+1", str(path))
        assert "Failed to write history" in caplog.text
