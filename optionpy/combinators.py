from __future__ import annotations
import functools
import inspect
from typing import Any, Callable, Iterable, List, TypeVar

from .errors import InvalidArgument
from .logger import get_logger
from .option import Option, Some, NONE

T = TypeVar("T")
U = TypeVar("U")


def declares_void(f: Callable[..., Any]) -> bool:
    """True when function or method ``f`` is annotated as returning ``None``.

    Classes always build a value whatever their ``__init__`` declares. Builtins
    and other callables without an inspectable signature count as non-void.
    """
    while isinstance(f, functools.partial):
        f = f.func
    if inspect.isclass(f) or not inspect.isroutine(f):
        return False
    try:
        ret = inspect.signature(f).return_annotation
    except (TypeError, ValueError):
        return False
    return ret is None or ret is type(None) or ret == "None"


def lift(result: U, op: str, **fields: Any) -> Option[U]:
    if result is None:
        get_logger().debug("callable returned None", op=op, **fields)
        raise InvalidArgument(f"{op}: callable returned None; a present Option cannot hold None")
    return Some(result)


def map_option(o: Option[T], f: Callable[[T], U]) -> Option[U] | None:
    return o.map(f)


def flat_map(o: Option[T], f: Callable[[T], Option[U]]) -> Option[U]:
    return o.flat_map(f)


def filter_option(o: Option[T], pred: Callable[[T], bool]) -> Option[T]:
    return o.filter(pred)


def flatten(x: Option[Option[T]] | Iterable[Option[T]]) -> Option[T] | List[T]:
    """Collapse one level of optionality.

    ``flatten(Some(Some(1)))`` is ``Some(1)``; any other iterable of options
    is flattened into the list of its present values, see ``flatten_all``.
    """
    if isinstance(x, Option):
        return x.flatten()
    return flatten_all(x)


def flatten_all(options: Iterable[Option[T]]) -> List[T]:
    out: List[T] = []
    for o in options:
        if not isinstance(o, Option):
            raise TypeError(f"flatten_all expects Options, got {type(o).__name__}")
        out.extend(o)
    return out
