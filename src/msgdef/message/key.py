"""Typed message keys.

``MessageKey`` names a message. ``Arg1`` .. ``Arg5`` pair a key with a fixed
number of placeholders, one per argument position, so that ``apply()`` keeps
the static type of every argument:

    >>> greet = arg2("greet", Text, lambda count: Text(str(count)))
    >>> greet.apply("Ann", 3)
    Translatable(key='greet', args=(Text(content='Ann'), Text(content='3')))

All constructors validate eagerly: an empty key raises ValueError, a None key
or a missing placeholder raises TypeError.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar, overload

from msgdef.message.output import OutputLike, Translatable, as_output

__all__ = [
    "Arg1",
    "Arg2",
    "Arg3",
    "Arg4",
    "Arg5",
    "MessageKey",
    "arg1",
    "arg2",
    "arg3",
    "arg4",
    "arg5",
    "key",
]

type PlaceholderFn[T] = Callable[[T], OutputLike]
"""Any callable converting an argument of type T into an output unit."""


def _require_key(key: object) -> None:
    if key is None:
        msg = "key must not be None"
        raise TypeError(msg)
    if not isinstance(key, str):
        msg = f"key must be a string, got {type(key).__name__}"
        raise TypeError(msg)
    if not key:
        msg = "key must not be empty"
        raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class MessageKey:
    """Key of a message without arguments.

    Attributes:
        key: Non-empty message key
    """

    key: str

    def __post_init__(self) -> None:
        """Validate the key.

        Raises:
            TypeError: If key is None or not a string
            ValueError: If key is empty
        """
        _require_key(self.key)

    def as_output(self) -> Translatable:
        """Return the argument-less Translatable for this key."""
        return Translatable(self.key)

    @overload
    def with_args[A1](self, arg1: PlaceholderFn[A1], /) -> Arg1[A1]: ...

    @overload
    def with_args[A1, A2](
        self, arg1: PlaceholderFn[A1], arg2: PlaceholderFn[A2], /
    ) -> Arg2[A1, A2]: ...

    @overload
    def with_args[A1, A2, A3](
        self, arg1: PlaceholderFn[A1], arg2: PlaceholderFn[A2], arg3: PlaceholderFn[A3], /
    ) -> Arg3[A1, A2, A3]: ...

    @overload
    def with_args[A1, A2, A3, A4](
        self,
        arg1: PlaceholderFn[A1],
        arg2: PlaceholderFn[A2],
        arg3: PlaceholderFn[A3],
        arg4: PlaceholderFn[A4],
        /,
    ) -> Arg4[A1, A2, A3, A4]: ...

    @overload
    def with_args[A1, A2, A3, A4, A5](
        self,
        arg1: PlaceholderFn[A1],
        arg2: PlaceholderFn[A2],
        arg3: PlaceholderFn[A3],
        arg4: PlaceholderFn[A4],
        arg5: PlaceholderFn[A5],
        /,
    ) -> Arg5[A1, A2, A3, A4, A5]: ...

    def with_args(self, *placeholders: PlaceholderFn[Any]) -> _ArgN:
        """Bind placeholders to this key.

        Args:
            *placeholders: One to five placeholder functions, in argument order

        Returns:
            The ArgN matching the number of placeholders

        Raises:
            ValueError: If fewer than one or more than five placeholders are given
            TypeError: If a placeholder is None or not callable
        """
        arg_type = _ARG_TYPES.get(len(placeholders))
        if arg_type is None:
            msg = f"with_args() takes 1 to 5 placeholders, got {len(placeholders)}"
            raise ValueError(msg)
        return arg_type(self.key, *placeholders)


class _ArgN:
    """Shared behaviour of Arg1 .. Arg5."""

    __slots__ = ()

    arity: ClassVar[int]
    key: str

    @property
    def placeholders(self) -> tuple[PlaceholderFn[Any], ...]:
        """Placeholder functions in argument order."""
        return tuple(getattr(self, f"arg{index}") for index in range(1, self.arity + 1))

    def message_key(self) -> MessageKey:
        """Return the bare MessageKey sharing this key."""
        return MessageKey(self.key)

    def _validate(self) -> None:
        _require_key(self.key)
        for index, placeholder in enumerate(self.placeholders, start=1):
            if placeholder is None:
                msg = f"arg{index} must not be None"
                raise TypeError(msg)
            if not callable(placeholder):
                msg = f"arg{index} must be callable, got {type(placeholder).__name__}"
                raise TypeError(msg)

    def _translate(self, *values: Any) -> Translatable:
        args = tuple(
            as_output(placeholder(value))
            for placeholder, value in zip(self.placeholders, values, strict=True)
        )
        return Translatable(self.key, args)


@dataclass(frozen=True, slots=True)
class Arg1[A1](_ArgN):
    """Message key with one placeholder."""

    arity: ClassVar[int] = 1

    key: str
    arg1: PlaceholderFn[A1]

    def __post_init__(self) -> None:
        self._validate()

    def apply(self, a1: A1) -> Translatable:
        """Convert the argument and combine it with the key."""
        return self._translate(a1)


@dataclass(frozen=True, slots=True)
class Arg2[A1, A2](_ArgN):
    """Message key with two placeholders."""

    arity: ClassVar[int] = 2

    key: str
    arg1: PlaceholderFn[A1]
    arg2: PlaceholderFn[A2]

    def __post_init__(self) -> None:
        self._validate()

    def apply(self, a1: A1, a2: A2) -> Translatable:
        """Convert the arguments and combine them with the key."""
        return self._translate(a1, a2)


@dataclass(frozen=True, slots=True)
class Arg3[A1, A2, A3](_ArgN):
    """Message key with three placeholders."""

    arity: ClassVar[int] = 3

    key: str
    arg1: PlaceholderFn[A1]
    arg2: PlaceholderFn[A2]
    arg3: PlaceholderFn[A3]

    def __post_init__(self) -> None:
        self._validate()

    def apply(self, a1: A1, a2: A2, a3: A3) -> Translatable:
        """Convert the arguments and combine them with the key."""
        return self._translate(a1, a2, a3)


@dataclass(frozen=True, slots=True)
class Arg4[A1, A2, A3, A4](_ArgN):
    """Message key with four placeholders."""

    arity: ClassVar[int] = 4

    key: str
    arg1: PlaceholderFn[A1]
    arg2: PlaceholderFn[A2]
    arg3: PlaceholderFn[A3]
    arg4: PlaceholderFn[A4]

    def __post_init__(self) -> None:
        self._validate()

    def apply(self, a1: A1, a2: A2, a3: A3, a4: A4) -> Translatable:
        """Convert the arguments and combine them with the key."""
        return self._translate(a1, a2, a3, a4)


@dataclass(frozen=True, slots=True)
class Arg5[A1, A2, A3, A4, A5](_ArgN):
    """Message key with five placeholders."""

    arity: ClassVar[int] = 5

    key: str
    arg1: PlaceholderFn[A1]
    arg2: PlaceholderFn[A2]
    arg3: PlaceholderFn[A3]
    arg4: PlaceholderFn[A4]
    arg5: PlaceholderFn[A5]

    def __post_init__(self) -> None:
        self._validate()

    def apply(self, a1: A1, a2: A2, a3: A3, a4: A4, a5: A5) -> Translatable:
        """Convert the arguments and combine them with the key."""
        return self._translate(a1, a2, a3, a4, a5)


_ARG_TYPES: dict[int, type[_ArgN]] = {
    arg_type.arity: arg_type for arg_type in (Arg1, Arg2, Arg3, Arg4, Arg5)
}


def key(name: str) -> MessageKey:
    """Create a MessageKey."""
    return MessageKey(name)


def arg1[A1](name: str, arg1: PlaceholderFn[A1]) -> Arg1[A1]:
    """Create an Arg1."""
    return Arg1(name, arg1)


def arg2[A1, A2](name: str, arg1: PlaceholderFn[A1], arg2: PlaceholderFn[A2]) -> Arg2[A1, A2]:
    """Create an Arg2."""
    return Arg2(name, arg1, arg2)


def arg3[A1, A2, A3](
    name: str, arg1: PlaceholderFn[A1], arg2: PlaceholderFn[A2], arg3: PlaceholderFn[A3]
) -> Arg3[A1, A2, A3]:
    """Create an Arg3."""
    return Arg3(name, arg1, arg2, arg3)


def arg4[A1, A2, A3, A4](
    name: str,
    arg1: PlaceholderFn[A1],
    arg2: PlaceholderFn[A2],
    arg3: PlaceholderFn[A3],
    arg4: PlaceholderFn[A4],
) -> Arg4[A1, A2, A3, A4]:
    """Create an Arg4."""
    return Arg4(name, arg1, arg2, arg3, arg4)


def arg5[A1, A2, A3, A4, A5](
    name: str,
    arg1: PlaceholderFn[A1],
    arg2: PlaceholderFn[A2],
    arg3: PlaceholderFn[A3],
    arg4: PlaceholderFn[A4],
    arg5: PlaceholderFn[A5],
) -> Arg5[A1, A2, A3, A4, A5]:
    """Create an Arg5."""
    return Arg5(name, arg1, arg2, arg3, arg4, arg5)
