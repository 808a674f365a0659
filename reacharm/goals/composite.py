"""Goals built from other goals: all of, any of, and negation."""

from __future__ import annotations

from typing import Any, List, Protocol, Sequence


class Goal(Protocol):
    def tick(self, t: Any, world: Any) -> None: ...

    def is_complete(self, world: Any) -> bool: ...

    def evaluate(self, world: Any) -> float: ...


class All:
    """Complete when every inner goal is; scores the minimum (1.0 when empty)."""

    def __init__(self, goals: Sequence[Goal]) -> None:
        self.goals: List[Goal] = list(goals)

    def tick(self, t: Any, world: Any) -> None:
        for goal in self.goals:
            goal.tick(t, world)

    def is_complete(self, world: Any) -> bool:
        return all(goal.is_complete(world) for goal in self.goals)

    def evaluate(self, world: Any) -> float:
        return min((goal.evaluate(world) for goal in self.goals), default=1.0)


class Any:
    """Complete when some inner goal is; scores the maximum (0.0 when empty)."""

    def __init__(self, goals: Sequence[Goal]) -> None:
        self.goals: List[Goal] = list(goals)

    def tick(self, t: object, world: object) -> None:
        for goal in self.goals:
            goal.tick(t, world)

    def is_complete(self, world: object) -> bool:
        return any(goal.is_complete(world) for goal in self.goals)

    def evaluate(self, world: object) -> float:
        return max((goal.evaluate(world) for goal in self.goals), default=0.0)


class Not:
    """Complete when the inner goal is not; scores ``1 - inner``."""

    def __init__(self, goal: Goal) -> None:
        self.goal = goal

    def tick(self, t: object, world: object) -> None:
        self.goal.tick(t, world)

    def is_complete(self, world: object) -> bool:
        return not self.goal.is_complete(world)

    def evaluate(self, world: object) -> float:
        return 1.0 - self.goal.evaluate(world)