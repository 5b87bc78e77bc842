from __future__ import annotations
from typing import Any, Callable, Generic, List, TypeVar

from .combinators import declares_void, lift
from .logger import get_logger
from .option import Option, NONE

T = TypeVar("T")

Thunk = Callable[[], Any]


def _check_thunks(name: str, args: tuple, kwargs: dict) -> None:
    for a in list(args) + list(kwargs.values()):
        if not callable(a):
            raise TypeError(f"forward({name!r}): arguments must be zero-argument callables, got {type(a).__name__}")


def forward(option: Option[T], name: str, *args: Thunk, **kwargs: Thunk) -> Option[Any] | None:
    """Apply member ``name`` of the wrapped value when ``option`` is present.

    Arguments are thunks. On an absent option nothing is evaluated and
    ``NONE`` is returned. On a present option every thunk is called exactly
    once, positional ones left to right, then keyword ones in the order given.

    A callable member is called with the evaluated arguments; any other member
    is read as an attribute and takes no arguments. Members declared as
    returning ``None`` run for their effect and the call returns ``None``.

    Example:
        ```python
        Some("hoge").forward.upper()            # Some('HOGE')
        Some(user).forward.rename(lambda: nxt)  # None, rename is void
        NONE.forward.upper()                    # NONE
        ```
    """
    _check_thunks(name, args, kwargs)
    if option.is_none():
        get_logger().debug("forward skipped on empty option", op="forward", member=name)
        return NONE
    target = option.get()
    pos: List[Any] = [a() for a in args]
    kw = {k: v() for k, v in kwargs.items()}
    member = getattr(target, name)
    if callable(member):
        if declares_void(member):
            member(*pos, **kw)
            return None
        return lift(member(*pos, **kw), "forward", member=name)
    if pos or kw:
        raise TypeError(f"forward({name!r}): attribute is not callable and takes no arguments")
    return lift(member, "forward", member=name)


class ForwardedMember(Generic[T]):
    __slots__ = ("_option", "_name")

    def __init__(self, option: Option[T], name: str):
        self._option = option
        self._name = name

    def __call__(self, *args: Thunk, **kwargs: Thunk) -> Option[Any] | None:
        return forward(self._option, self._name, *args, **kwargs)

    def __repr__(self) -> str:
        return f"ForwardedMember({self._option!r}, {self._name!r})"


class Forwarder(Generic[T]):
    """Attribute proxy over an option: ``opt.forward.name(*thunks)``.

    Dunder names are not forwarded; use ``forward(opt, "__len__")`` for those.
    """
    __slots__ = ("__option",)

    def __init__(self, option: Option[T]):
        self.__option = option

    def __getattr__(self, name: str) -> ForwardedMember[T]:
        if name.startswith("__") and name.endswith("__"):
            raise AttributeError(name)
        return ForwardedMember(self.__option, name)
