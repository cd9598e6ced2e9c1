"""
Input source protocol - defines where paddle intents come from (keyboard, scripts, etc.)
"""

from typing import Protocol

from duel_pong.core.entities import PaddleInput
from duel_pong.core.entities import Side


class InputSource(Protocol):
    """
    Protocol for anything that can produce an input snapshot for a frame.

    The match never polls devices itself; the host asks an input source for
    the current signals and hands them to ``PongMatch.step``.
    """

    def poll(self) -> dict[Side, PaddleInput]:
        """
        Read the up/down signals of both paddles for the current frame.

        Returns:
            Mapping from side to its input. Missing sides hold still.
        """
        ...
