"""Exception hierarchy for the simulation core.

Blocked moves and failed spawn attempts are ordinary game outcomes and
never raise. What is here is either a reportable setup failure or a
caller bug.
"""


class HexSimError(Exception):
    """Root of all hexsim domain exceptions."""


class SimulationError(HexSimError):
    """Errors during simulation execution."""


class SpawnExhaustedError(SimulationError):
    """Random placement gave up after the configured number of attempts."""

    def __init__(self, attempts: int) -> None:
        super().__init__(f"no free passable tile found after {attempts} spawn attempts")
        self.attempts = attempts


class IllegalActionError(AssertionError):
    """An action that no caller may construct, e.g. a TURN with a relative marker.

    Derives from AssertionError because it signals a bug in the code that
    produced the action. The engine never catches it.
    """
