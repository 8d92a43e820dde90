"""One-shot suppression flags."""


class OneShotFlag:
    """A flag armed for exactly one subsequent decision.

    `consume()` reports whether the flag was armed and disarms it, so every
    `arm_once()` affects at most one read.
    """

    __slots__ = ("_armed",)

    def __init__(self) -> None:
        self._armed = False

    def arm_once(self) -> None:
        self._armed = True

    def consume(self) -> bool:
        armed = self._armed
        self._armed = False
        return armed

    @property
    def is_armed(self) -> bool:
        return self._armed

    def __repr__(self) -> str:
        return f"OneShotFlag(armed={self._armed})"
