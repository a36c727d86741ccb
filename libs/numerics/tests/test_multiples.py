import pytest
from pydantic import ValidationError

from libs.numerics import models, multiples


def test_default_scan_yields_twelve_and_twentyfour():
    hits = multiples.qualifying_values()
    assert [hit.value for hit in hits] == [12, 24]
    assert [hit.index for hit in hits] == [4, 8]


def test_print_multiples_writes_lines(capsys):
    multiples.print_multiples()
    assert capsys.readouterr().out == "multiple of 4: 12\nmultiple of 4: 24\n"


def test_print_multiples_uses_custom_writer():
    lines: list[str] = []
    multiples.print_multiples(models.MultipleScan(stop=20, factor=5, divisor=10), write=lines.append)
    assert lines == [f"multiple of 10: {v}" for v in (10, 20, 30, 40, 50, 60, 70, 80, 90, 100)]


def test_empty_range_emits_nothing():
    assert multiples.qualifying_values(models.MultipleScan(start=5, stop=4)) == []


def test_scan_rejects_non_positive_divisor():
    with pytest.raises(ValidationError):
        models.MultipleScan(divisor=0)
