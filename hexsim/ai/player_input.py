"""Queued player commands connecting an input layer to the tick loop."""

from __future__ import annotations

import queue
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hexsim.actions.base import Action
    from hexsim.core.actor import Actor
    from hexsim.core.world_state import WorldState


class PlayerInput:
    """FIFO of actions for the player actor.

    An input layer pushes commands, possibly from its own thread; the
    player's turn pops at most one per tick. An empty queue means the
    player waits this tick without acting.
    """

    __slots__ = ("_queue",)

    def __init__(self) -> None:
        self._queue: queue.Queue[Action] = queue.Queue()

    def push(self, action: Action) -> None:
        self._queue.put_nowait(action)

    def extend(self, actions: list[Action]) -> None:
        for action in actions:
            self._queue.put_nowait(action)

    def decide(self, actor: Actor, world: WorldState) -> Action | None:
        try:
            return self._queue.get_nowait()
        except queue.Empty:
            return None

    def clear(self) -> None:
        while True:
            try:
                self._queue.get_nowait()
            except queue.Empty:
                break

    @property
    def empty(self) -> bool:
        return self._queue.empty()
