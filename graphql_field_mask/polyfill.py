from collections.abc import Iterable
from typing import Callable, TypeVar, Union

T = TypeVar('T')
U = TypeVar('U')


# Strings are iterable but count as single values here.
def flat_map(iterable: Iterable[T], func: Callable[[T], Union[Iterable[U], U]]) -> list[U]:
    result: list[U] = []
    for e in iterable:
        r = func(e)
        if isinstance(r, Iterable) and not isinstance(r, str):
            result.extend(r)
        else:
            result.append(r)

    return result
