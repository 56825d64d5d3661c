"""Abstract base class for all generation rules.

Every rule in the system implements this interface. Rules are:
- Self-contained: each produces one kind of building element
- Composable: multiple rules run in sequence via the registry
- Conditional: each rule decides if it applies to the current context
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from modelgen.models.context import GenerationContext


class GenerationRule(ABC):
    """
    Base class for all generation rules.

    Subclasses implement `applies()` and `apply()`.
    The generator queries the registry, filters by `applies()`,
    sorts by `priority`, and calls `apply()` in order.
    """

    # Lower priority = runs first. Default 100.
    priority: int = 100

    # IDs of rules that must run before this one.
    dependencies: list[str] = []

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this rule (e.g., 'wall.exterior')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'Exterior Walls')."""
        ...

    def applies(self, context: GenerationContext) -> bool:
        """Return True if this rule should run for the given context."""
        return True

    @abstractmethod
    def apply(self, context: GenerationContext) -> None:
        """
        Add this rule's elements to the context.

        The context provides the resolved plan and the output of every
        rule that ran before this one (e.g. packed rooms for walls).
        """
        ...
