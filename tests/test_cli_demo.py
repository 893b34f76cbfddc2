"""Tests for ``multivalue demo`` — sample dictionary output."""

import pytest

from multivalue.cli import main
from multivalue.cli._demo import build_sample


class TestBuildSample:
    def test_bucket_sizes(self) -> None:
        sample = build_sample()
        assert sample.keys() == ("key1", "key2", "key3")
        assert len(sample.get_values("key1") or ()) == 3
        assert len(sample.get_values("key2") or ()) == 4
        assert len(sample.get_values("key3") or ()) == 5
        assert len(sample) == 12

    def test_value_format(self) -> None:
        assert build_sample().get_values("key1") == (
            "key1: Value1",
            "key1: Value2",
            "key1: Value3",
        )


class TestRunDemo:
    def test_prints_repr_then_pairs(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["demo"])
        lines = capsys.readouterr().out.splitlines()

        assert lines[0].startswith("MultiValueDictionary({'key1': {")
        assert lines[1] == "('key1', 'key1: Value1')"
        assert lines[-1] == "('key3', 'key3: Value5')"
        assert len(lines) == 1 + 12
