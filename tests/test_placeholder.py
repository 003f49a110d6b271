"""Tests for Placeholder and the built-in placeholder factories.

Python 3.13+.
"""

from datetime import date
from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from msgdef.locale_utils import LocaleId
from msgdef.message import placeholder
from msgdef.message.key import MessageKey
from msgdef.message.output import Text, Translatable
from msgdef.message.placeholder import Placeholder


class TestPlaceholder:
    """Test Placeholder calls and composition."""

    def test_call(self) -> None:
        """Calling converts the value."""
        upper = Placeholder(lambda value: Text(value.upper()))
        assert upper("abc") == Text("ABC")

    def test_call_accepts_output_like(self) -> None:
        """Converters may return anything with as_output()."""
        nested = Placeholder(MessageKey)
        assert nested("inner") == Translatable("inner")

    def test_non_callable_rejected(self) -> None:
        """Non-callable converters raise TypeError."""
        with pytest.raises(TypeError, match="convert must be callable"):
            Placeholder("nope")  # type: ignore[arg-type]

    def test_non_output_result_rejected(self) -> None:
        """Converters returning plain values raise TypeError on call."""
        raw = Placeholder(lambda value: value)
        with pytest.raises(TypeError, match="Expected an Output"):
            raw(1)

    def test_compose(self) -> None:
        """compose() applies the new function first."""
        as_text = placeholder.text()
        length = as_text.compose(len)
        assert length([1, 2, 3]) == Text("3")

    def test_compose_rejects_non_callable(self) -> None:
        """compose() requires a callable."""
        with pytest.raises(TypeError, match="before must be callable"):
            placeholder.text().compose(None)  # type: ignore[arg-type]

    def test_compose_propagates_errors(self) -> None:
        """Errors from either function are not suppressed."""

        def fail(_: object) -> str:
            raise KeyError("before")

        with pytest.raises(KeyError, match="before"):
            placeholder.text().compose(fail)("x")

        broken = Placeholder(lambda _: 1 / 0)
        with pytest.raises(ZeroDivisionError):
            broken.compose(str)("x")

    @given(st.integers())
    def test_compose_matches_manual_application(self, value: int) -> None:
        """p.compose(f)(x) == p(f(x))."""
        as_text = placeholder.text()
        assert as_text.compose(abs)(value) == as_text(abs(value))


class TestFactories:
    """Test the Babel-backed placeholder factories."""

    def test_text(self) -> None:
        """text() renders str(value)."""
        assert placeholder.text()(42) == Text("42")

    def test_message(self) -> None:
        """message() passes outputs through."""
        assert placeholder.message()(MessageKey("k")) == Translatable("k")

    def test_number(self) -> None:
        """number() applies locale grouping and decimal symbols."""
        assert placeholder.number("en_US")(1234.5) == Text("1,234.5")
        assert placeholder.number(LocaleId("de", "DE"))(1234.5) == Text("1.234,5")

    def test_decimal_pattern(self) -> None:
        """decimal() honours an explicit pattern."""
        assert placeholder.decimal("en_US", "#,##0.00")(Decimal("1234.5")) == Text("1,234.50")

    def test_percent(self) -> None:
        """percent() scales ratios."""
        assert placeholder.percent("en_US")(0.25) == Text("25%")

    def test_date(self) -> None:
        """date() formats with the locale's conventions."""
        day = date(2024, 1, 15)
        assert placeholder.date("en_US")(day) == Text("Jan 15, 2024")
        assert placeholder.date(LocaleId("de", "DE"))(day) == Text("15.01.2024")
