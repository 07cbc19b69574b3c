"""Candidate ordering — effective priorities, enablement, stable sort.

INVARIANT: The order of :attr:`PrioritizedComponents.enabled` is a pure
function of (added factories, PriorityConfig). Higher priority first;
equal priorities keep registration order.

Overrides naming unknown factories are ignored. Nothing here raises.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

from repolayout.domain.layout import factory_identities, factory_name
from repolayout.domain.repository import PriorityConfig

T = TypeVar("T")


@dataclass(frozen=True)
class PrioritizedComponent(Generic[T]):
    """A factory paired with its effective priority for one call."""

    component: T
    priority: float
    index: int
    name: str
    disabled: bool = False

    def describe(self) -> str:
        status = ", disabled" if self.disabled else ""
        return f"{self.name} (priority={self.priority}{status})"


class PrioritizedComponents(Generic[T]):
    """Builds the sorted candidate list from factories and session config.

    Usage::

        components = PrioritizedComponents(session.priorities)
        for factory in factories:
            components.add(factory, factory.priority)
        for candidate in components.enabled:
            ...
    """

    def __init__(self, config: PriorityConfig | None = None) -> None:
        self._config = config or PriorityConfig()
        self._components: list[PrioritizedComponent[T]] = []

    def add(self, component: T, priority: float) -> PrioritizedComponent[T]:
        """Register *component* with its declared *priority*."""
        index = len(self._components)
        identities = factory_identities(component)
        if self._config.implicit:
            priority = float(-index)
        effective = self._override(identities, priority)
        disabled = math.isnan(effective) or any(
            key in self._config.disabled for key in identities
        )
        candidate = PrioritizedComponent(
            component=component,
            priority=effective,
            index=index,
            name=factory_name(component),
            disabled=disabled,
        )
        self._components.append(candidate)
        return candidate

    def _override(self, identities: list[str], default: float) -> float:
        for key in identities:
            if key in self._config.overrides:
                return float(self._config.overrides[key])
        return float(default)

    def is_empty(self) -> bool:
        """True iff nothing was added, enabled or not."""
        return not self._components

    def __len__(self) -> int:
        return len(self._components)

    @property
    def all(self) -> list[PrioritizedComponent[T]]:
        """Every known candidate in sorted order, disabled ones included."""
        return sorted(self._components, key=_sort_key)

    @property
    def enabled(self) -> list[PrioritizedComponent[T]]:
        """Enabled candidates, highest effective priority first."""
        return [c for c in self.all if not c.disabled]

    def describe(self) -> str:
        """Render all candidates for diagnostics, e.g. ``a (priority=2.0), b (priority=1.0)``."""
        return ", ".join(c.describe() for c in self.all)

    def __str__(self) -> str:
        return self.describe()


def _sort_key(candidate: PrioritizedComponent[T]) -> tuple[float, int]:
    # NaN sorts first, same as an unordered float compared "greater".
    if math.isnan(candidate.priority):
        return (-math.inf, candidate.index)
    return (-candidate.priority, candidate.index)
