"""Tests for multivalue.cli — CLI entrypoint and argument parsing."""

import pytest

from multivalue.cli import main


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_demo_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["demo", "--help"])
        assert exc_info.value.code == 0

    def test_group_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["group", "--help"])
        assert exc_info.value.code == 0


class TestCLIBadArgs:
    def test_unknown_command(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["explode"])
        assert exc_info.value.code == 2

    def test_unknown_layout(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["group", "--layout", "table", "--pair", "k=v"])
        assert exc_info.value.code == 2


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert "multivalue" in captured.out
