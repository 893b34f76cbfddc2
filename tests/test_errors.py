"""Tests for multivalue.errors — exception hierarchy and error messages."""

import pytest

from multivalue.errors import ConfigurationError, MultiValueError, PairFormatError


class TestHierarchy:
    def test_configuration_error_is_multivalue_error(self) -> None:
        assert issubclass(ConfigurationError, MultiValueError)

    def test_pair_format_error_is_multivalue_error(self) -> None:
        assert issubclass(PairFormatError, MultiValueError)

    def test_base_is_exception(self) -> None:
        assert issubclass(MultiValueError, Exception)


class TestPairFormatError:
    def test_fields(self) -> None:
        err = PairFormatError("novalue", "Missing separator '='", 3)
        assert err.text == "novalue"
        assert err.detail == "Missing separator '='"
        assert err.line == 3

    def test_str_with_line(self) -> None:
        err = PairFormatError("novalue", "Missing separator '='", 3)
        assert str(err) == "line 3: Missing separator '=': 'novalue'"

    def test_str_without_line(self) -> None:
        err = PairFormatError("=x", "Empty key")
        assert str(err) == "Empty key: '=x'"

    def test_default_detail(self) -> None:
        assert PairFormatError("junk").detail == "Malformed pair"

    def test_frozen(self) -> None:
        err = PairFormatError("junk")
        with pytest.raises(AttributeError):
            err.line = 1  # type: ignore[misc]

    def test_catchable_as_base(self) -> None:
        with pytest.raises(MultiValueError):
            raise PairFormatError("junk")
