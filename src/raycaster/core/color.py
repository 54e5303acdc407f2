"""8-bit RGB color value."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from raycaster.errors import InvalidColorError

MAX_CHANNEL_VALUE = 255


@dataclass(frozen=True)
class Color:
    """An RGB color with integer channels in [0, 255]. No alpha.

    Attributes:
        r: Red channel.
        g: Green channel.
        b: Blue channel.
    """

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidColorError(f"Color channel {name} must be an int, got {value!r}")
            if not 0 <= value <= MAX_CHANNEL_VALUE:
                raise InvalidColorError(
                    f"Color channel {name} = {value} is outside [0, {MAX_CHANNEL_VALUE}]"
                )

    @classmethod
    def of(cls, value: Color | Sequence[int]) -> Color:
        """Coerce a Color or an (r, g, b) sequence into a Color."""
        if isinstance(value, Color):
            return value
        if len(value) != 3:
            raise InvalidColorError(f"Expected 3 color channels, got {len(value)}")
        return cls(int(value[0]), int(value[1]), int(value[2]))

    def __iter__(self) -> Iterator[int]:
        return iter((self.r, self.g, self.b))

    def to_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)
