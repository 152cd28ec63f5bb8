"""Property definitions checked by propbridge.

A Prop is a body plus the Hypothesis strategies that feed it. A Prop with
no strategies is evaluated exactly once and, when it holds, is proved.

    ints = Properties("Ints")

    @ints.property("addition commutes")
    @forall(st.integers(), st.integers())
    def _(a, b):
        return a + b == b + a

A body fails by raising (typically AssertionError) or by returning False.
"""

from typing import Any, Callable, Optional, Union

from hypothesis.strategies import SearchStrategy


class Prop:
    """A checkable proposition."""

    def __init__(
        self,
        body: Callable[..., Any],
        *strategies: SearchStrategy,
        label: Optional[str] = None,
        **kw_strategies: SearchStrategy,
    ):
        self.body = body
        self.strategies = tuple(strategies)
        self.kw_strategies = dict(kw_strategies)
        self.label = label or getattr(body, "__name__", "prop")

    @property
    def is_generative(self) -> bool:
        """Whether the property draws inputs from strategies."""
        return bool(self.strategies or self.kw_strategies)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.body(*args, **kwargs)

    def __repr__(self) -> str:
        return f"Prop({self.label!r}, strategies={len(self.strategies) + len(self.kw_strategies)})"


def forall(
    *strategies: SearchStrategy, **kw_strategies: SearchStrategy
) -> Callable[[Callable[..., Any]], Prop]:
    """Decorator turning a function into a Prop over the given strategies."""
    def decorator(body: Callable[..., Any]) -> Prop:
        return Prop(body, *strategies, **kw_strategies)
    return decorator


def prop(body: Callable[[], Any]) -> Prop:
    """Decorator for a property without inputs (checked once)."""
    return Prop(body)


class Properties:
    """A named collection of properties.

    Instances can be built at module level (singleton subjects) or a
    subclass can register its properties in ``__init__`` (constructor
    subjects).
    """

    def __init__(self, name: Optional[str] = None):
        self.name = name or type(self).__name__
        self._entries: list[tuple[str, Prop]] = []

    @property
    def properties(self) -> list[tuple[str, Prop]]:
        """(name, prop) pairs in registration order."""
        return list(self._entries)

    def property(
        self, name: str, p: Union[Prop, Callable[..., Any], None] = None
    ) -> Any:
        """Register a property under ``name``.

        Used directly (``props.property("x", p)``) or as a decorator
        (``@props.property("x")``). Plain callables become input-less props.
        """
        if p is None:
            return lambda target: self.property(name, target)

        if not isinstance(p, Prop):
            p = Prop(p)
        self._entries.append((name, p))
        return p

    def include(self, other: "Properties", prefix: str = "") -> None:
        """Register every property of another collection."""
        for name, p in other.properties:
            self._entries.append((prefix + name, p))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Properties({self.name!r}, {len(self._entries)} properties)"
