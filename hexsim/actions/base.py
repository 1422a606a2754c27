"""Action: the value an actor's decision logic hands to the engine."""

from __future__ import annotations

from dataclasses import dataclass

from hexsim.core.enums import ActionType, Direction, Relative
from hexsim.core.exceptions import IllegalActionError


def _movement_dir(direction: Direction | Relative | int) -> Direction | Relative:
    if isinstance(direction, (Direction, Relative)):
        return direction
    return Direction(direction % 6)


@dataclass(frozen=True, slots=True)
class Action:
    """One verb plus an optional direction.

    MOVE, RUN and MELEE take a Direction or a Relative marker, both read
    relative to the actor's facing. TURN takes a Direction only; the
    constructors below refuse a Relative for it, and the resolver treats a
    hand-built TURN with one as a fatal bug.
    """

    verb: ActionType
    direction: Direction | Relative | None = None

    @classmethod
    def move(cls, direction: Direction | Relative | int = Relative.FORWARD) -> Action:
        return cls(ActionType.MOVE, _movement_dir(direction))

    @classmethod
    def run(cls, direction: Direction | Relative | int = Relative.FORWARD) -> Action:
        return cls(ActionType.RUN, _movement_dir(direction))

    @classmethod
    def turn(cls, direction: Direction | int) -> Action:
        if isinstance(direction, Relative):
            raise IllegalActionError(f"TURN cannot take relative marker {direction.name}")
        return cls(ActionType.TURN, Direction(direction % 6))

    @classmethod
    def melee(cls, direction: Direction | Relative | int = Relative.FORWARD) -> Action:
        return cls(ActionType.MELEE, _movement_dir(direction))

    @classmethod
    def use(cls) -> Action:
        return cls(ActionType.USE)

    @classmethod
    def wait(cls) -> Action:
        return cls(ActionType.WAIT)

    def __repr__(self) -> str:
        if self.direction is None:
            return f"Action({self.verb.name})"
        return f"Action({self.verb.name}, {self.direction.name})"
