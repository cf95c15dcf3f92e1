"""
Assignment tracker: which options the most recent parse set, and by which flag.
"""

from .option import OptionHandle


class AssignmentTracker:
    """Maps option handles to the flag that set them during one parse."""

    def __init__(self) -> None:
        self._assigned: dict[OptionHandle, str] = {}

    def reset(self) -> None:
        self._assigned.clear()

    def record(self, handle: OptionHandle, flag: str) -> None:
        self._assigned[handle] = flag

    def flag_for(self, handle: OptionHandle) -> str | None:
        return self._assigned.get(handle)

    def __contains__(self, handle: object) -> bool:
        return handle in self._assigned

    def __len__(self) -> int:
        return len(self._assigned)

    def items(self) -> list[tuple[OptionHandle, str]]:
        """Recorded (handle, flag) pairs in assignment order."""
        return list(self._assigned.items())
