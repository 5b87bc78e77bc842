from __future__ import annotations
import operator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

from .errors import EmptyAccess, InvalidArgument
from .logger import get_logger

if TYPE_CHECKING:
    from .forward import Forwarder

T = TypeVar("T")
U = TypeVar("U")


class Option(Generic[T]):
    """A value that is either present (``Some``) or absent (``NONE``).

    Absence is encoded by the variant, not by the wrapped value, so falsy
    values such as ``0`` or ``""`` are ordinary present values. Options are
    immutable; every combinator returns a new option.

    Example:
        ```python
        port = fetch(settings, "port").map(int).get_or_else(8080)
        ```
    """
    def is_some(self) -> bool: raise NotImplementedError
    def is_none(self) -> bool: return not self.is_some()

    def is_defined(self) -> bool: return self.is_some()
    def is_empty(self) -> bool: return not self.is_some()

    def get(self) -> T:
        """Return the wrapped value itself (no copy).

        Raises:
            EmptyAccess: If the option is absent.
        """
        if self.is_some():
            return self.value  # type: ignore[attr-defined]
        get_logger().debug("get on empty option", op="get")
        raise EmptyAccess("No such element: NONE.get")

    def get_or_else(self, default: U) -> T | U:
        return self.value if self.is_some() else default  # type: ignore[attr-defined]

    def or_else(self, alternative: "Option[U]") -> "Option[T | U]":
        if not isinstance(alternative, Option):
            raise TypeError(f"or_else expects an Option, got {type(alternative).__name__}")
        return self if self.is_some() else alternative

    def to_list(self) -> List[T]:
        return [self.value] if self.is_some() else []  # type: ignore[attr-defined]

    @classmethod
    def from_iterable(cls, items: Iterable[T]) -> "Option[T]":
        """Wrap the first element of ``items``, or return ``NONE`` when empty.

        At most one element is consumed, so generators and other one-shot
        iterators are left positioned after it.
        """
        for x in items:
            return Some(x)
        return NONE

    def map(self, f: Callable[[T], U]) -> "Option[U] | None":
        """Apply ``f`` to the value when present and wrap the result.

        A callable declared as returning ``None`` is run for its effect only
        and ``map`` returns ``None``. Any other callable that returns ``None``
        raises ``InvalidArgument``.
        """
        from .combinators import declares_void, lift
        if declares_void(f):
            if self.is_some():
                f(self.value)  # type: ignore[attr-defined]
            return None
        if self.is_some():
            return lift(f(self.value), "map")  # type: ignore[attr-defined]
        return NONE

    def for_each(self, f: Callable[[T], Any]) -> None:
        if self.is_some():
            f(self.value)  # type: ignore[attr-defined]

    def flat_map(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        if self.is_none():
            return NONE
        out = f(self.value)  # type: ignore[attr-defined]
        if not isinstance(out, Option):
            raise TypeError(f"flat_map function must return an Option, got {type(out).__name__}")
        return out

    def filter(self, pred: Callable[[T], bool]) -> "Option[T]":
        if self.is_some() and pred(self.value):  # type: ignore[attr-defined]
            return self
        return NONE

    def flatten(self) -> "Option[Any]":
        if self.is_none():
            return NONE
        inner = self.value  # type: ignore[attr-defined]
        if not isinstance(inner, Option):
            raise TypeError(f"flatten expects a nested Option, got Some({type(inner).__name__})")
        return inner

    @property
    def forward(self) -> "Forwarder[T]":
        """Proxy that applies members of the wrapped value only when present."""
        from .forward import Forwarder
        return Forwarder(self)

    def equals(self, other: "Option[U]", by: Callable[[T, U], bool] = operator.eq) -> bool:
        """Compare with ``other`` using ``by`` for the wrapped values.

        Two absent options are always equal and a present option never equals
        an absent one; ``by`` is only consulted when both are present.
        """
        if not isinstance(other, Option):
            raise TypeError(f"equals expects an Option, got {type(other).__name__}")
        if self.is_some() and other.is_some():
            return bool(by(self.value, other.value))  # type: ignore[attr-defined]
        return self.is_none() and other.is_none()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        if self.is_some():
            return hash((Some, self.value))  # type: ignore[attr-defined]
        return hash(_None)

    def __iter__(self) -> Iterator[T]:
        if self.is_some():
            yield self.value  # type: ignore[attr-defined]

    def __len__(self) -> int:
        return 1 if self.is_some() else 0

    def __bool__(self) -> bool:
        return self.is_some()

    def __str__(self) -> str:
        if self.is_some():
            return f"Some({self.value})"  # type: ignore[attr-defined]
        return "None()"

    def __repr__(self) -> str:
        if self.is_some():
            return f"Some({self.value!r})"  # type: ignore[attr-defined]
        return "None()"


@dataclass(frozen=True, eq=False, repr=False)
class Some(Option[T]):
    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            get_logger().debug("rejected None for Some", op="Some")
            raise InvalidArgument("Value must not be None")

    def is_some(self) -> bool: return True


class _None(Option[Any]):
    __slots__ = ()
    def is_some(self) -> bool: return False

    # copies and unpickled values resolve to the module-level singleton
    def __reduce__(self) -> str: return "NONE"
    def __copy__(self) -> "_None": return self
    def __deepcopy__(self, memo: dict) -> "_None": return self


NONE: Option[Any] = _None()


def Nothing(_type: Optional[type] = None) -> Option[Any]:
    """Return the absent option; ``_type`` only documents the intended type."""
    return NONE


def from_nullable(v: Optional[T]) -> Option[T]:
    return Some(v) if v is not None else NONE


def is_option(x: object) -> bool:
    return isinstance(x, Option)
