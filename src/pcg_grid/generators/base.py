"""The cell-transform interface shared by every generator."""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar, Union

if TYPE_CHECKING:
    from pcg_grid.grid.grid import Grid
    from pcg_grid.grid.types import Vec2

T = TypeVar("T")


class GridGenerator(ABC, Generic[T]):
    """Computes a new value for one cell.

    ``grid`` is the grid being written to. During ``Grid.apply`` it already
    holds new values for the cells visited earlier in the pass, so generators
    that read neighbors take their own snapshot grid instead.
    """

    @abstractmethod
    def generate(self, location: Vec2, size: Vec2, current: T, grid: Grid[T]) -> T:
        ...

    def __call__(self, location: Vec2, size: Vec2, current: T, grid: Grid[T]) -> T:
        return self.generate(location, size, current, grid)


class FunctionGenerator(GridGenerator[T]):
    """Adapts a plain callable.

    Accepts ``f(location, size, current)`` or
    ``f(location, size, current, grid)``; the arity is read once here.
    """

    def __init__(self, func: Callable[..., T]) -> None:
        self.func = func
        self.wants_grid = _positional_arity(func) >= 4

    def generate(self, location: Vec2, size: Vec2, current: T, grid: Grid[T]) -> T:
        if self.wants_grid:
            return self.func(location, size, current, grid)
        return self.func(location, size, current)

    def __repr__(self) -> str:
        return f"FunctionGenerator({getattr(self.func, '__name__', self.func)!r})"


def _positional_arity(func: Callable[..., Any]) -> int:
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        # Builtins without introspectable signatures get the short form.
        return 3
    count = 0
    for parameter in signature.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return 4
        if parameter.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            count += 1
    return count


GeneratorLike = Union[GridGenerator[T], Callable[..., T]]


def as_generator(generator: GeneratorLike[T]) -> GridGenerator[T]:
    """Return *generator* as a ``GridGenerator``, wrapping bare callables."""
    if isinstance(generator, GridGenerator):
        return generator
    if not callable(generator):
        raise TypeError(f"Expected a GridGenerator or callable, got {type(generator).__name__}")
    return FunctionGenerator(generator)
