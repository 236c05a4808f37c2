"""Tests for crumb.config — option dataclasses and default codecs."""

import pytest

from crumb.config import ParseOptions, StringifyOptions, percent_decode, percent_encode
from crumb.errors import InvalidArgument


class TestParseOptions:
    def test_defaults(self) -> None:
        assert ParseOptions().decode is percent_decode

    def test_override(self) -> None:
        opts = ParseOptions(decode=str.lower)
        assert opts.decode is str.lower

    def test_frozen(self) -> None:
        opts = ParseOptions()

        with pytest.raises(AttributeError):
            opts.decode = str.lower  # type: ignore[misc]

    def test_non_callable_decode(self) -> None:
        with pytest.raises(InvalidArgument, match="option decode is invalid"):
            ParseOptions(decode=42)  # type: ignore[arg-type]


class TestStringifyOptions:
    def test_defaults(self) -> None:
        assert StringifyOptions().encode is percent_encode

    def test_frozen(self) -> None:
        opts = StringifyOptions()

        with pytest.raises(AttributeError):
            opts.encode = str.upper  # type: ignore[misc]

    def test_non_callable_encode(self) -> None:
        with pytest.raises(InvalidArgument, match="option encode is invalid"):
            StringifyOptions(encode="upper")  # type: ignore[arg-type]


class TestPercentDecode:
    def test_plain_value_untouched(self) -> None:
        assert percent_decode("abc+def") == "abc+def"

    def test_decodes_utf8(self) -> None:
        assert percent_decode("%E2%9C%93%20ok") == "✓ ok"

    @pytest.mark.parametrize("value", ["%1", "%zz", "%1%20", "100%", "%E2%9C"])
    def test_malformed_kept_whole(self, value: str) -> None:
        assert percent_decode(value) == value


class TestPercentEncode:
    def test_unreserved_kept(self) -> None:
        assert percent_encode("AZaz09-_.!~*'()") == "AZaz09-_.!~*'()"

    def test_reserved_escaped(self) -> None:
        assert percent_encode('bar +baz;,/"') == "bar%20%2Bbaz%3B%2C%2F%22"

    def test_utf8(self) -> None:
        assert percent_encode("✓") == "%E2%9C%93"
