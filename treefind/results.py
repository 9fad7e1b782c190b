"""Result records produced by a search."""

from collections import namedtuple
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


# One reported entry: full joined path, rendered path, and kind
Match = namedtuple('Match', ['path', 'display', 'is_dir'])


@dataclass
class TraversalState:
    """Mutable state shared by the workers of one search.

    Counters are only changed on the event-loop thread, between awaits,
    so concurrent workers never lose an increment.
    """
    start: float
    visited: int = 0
    matched: int = 0
    elapsed: Optional[float] = None


@dataclass
class SearchSummary:
    """What a completed search reports back."""
    visited: int
    matched: int
    elapsed: float
    errors: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def partial(self) -> bool:
        """True when some subtrees were skipped because of errors."""
        return bool(self.errors)
