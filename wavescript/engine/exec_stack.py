"""Boolean execution stack for conditional gating.

The top frame says whether the instruction being executed has any
effect. The stack is never left empty: popping the last frame re-seeds
an always-true outer frame, so a stray ``}`` cannot disable the rest of
the program.
"""

from __future__ import annotations

from typing import List


class ExecutionStack:
    """Stack of gate frames, initialised to ``[True]``."""

    def __init__(self) -> None:
        self._frames: List[bool] = [True]

    def __len__(self) -> int:
        return len(self._frames)

    def __repr__(self) -> str:
        return f"ExecutionStack({self._frames!r})"

    @property
    def top(self) -> bool:
        return self._frames[-1]

    @property
    def frames(self) -> List[bool]:
        return list(self._frames)

    def push(self, gate: bool) -> None:
        self._frames.append(bool(gate))

    def push_gated(self, result: bool) -> None:
        """Open a frame that is only live when the current frame is."""
        self.push(self.top and result)

    def pop(self) -> bool:
        """Close the top frame and return it.

        An emptied stack gets a fresh ``True`` frame.
        """
        frame = self._frames.pop()
        if not self._frames:
            self._frames.append(True)
        return frame

    def negate(self) -> None:
        """Replace the top frame with its negation."""
        self._frames[-1] = not self._frames[-1]
