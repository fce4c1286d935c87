"""Region quadtree that splits an RGB image where its colours vary."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Pixel:
    """An 8-bit RGB colour."""

    r: int = 0
    g: int = 0
    b: int = 0


_PixelAt = Callable[[int, int], Pixel]


def _buffer_reader(data: Sequence[int], base_width: int) -> _PixelAt:
    def at(x: int, y: int) -> Pixel:
        offset = (y * base_width + x) * 3
        return Pixel(data[offset], data[offset + 1], data[offset + 2])

    return at


def _region(at: _PixelAt, x: int, y: int, width: int, height: int) -> list[Pixel]:
    return [at(i, j) for j in range(y, y + height) for i in range(x, x + width)]


def _average(pixels: Iterable[Pixel]) -> Pixel:
    pixels = list(pixels)
    if not pixels:
        raise ValueError("region holds no pixels")
    count = len(pixels)
    return Pixel(
        sum(p.r for p in pixels) // count,
        sum(p.g for p in pixels) // count,
        sum(p.b for p in pixels) // count,
    )


def _detail(pixels: Iterable[Pixel], average: Pixel) -> float:
    pixels = list(pixels)
    if not pixels:
        raise ValueError("region holds no pixels")
    total = sum(
        abs(average.r - p.r) + abs(average.g - p.g) + abs(average.b - p.b) for p in pixels
    )
    return total / (3 * len(pixels))


def average_color(
    data: Sequence[int], base_width: int, x: int, y: int, width: int, height: int
) -> Pixel:
    """Integer mean colour of a rectangle of a packed RGB buffer."""
    return _average(_region(_buffer_reader(data, base_width), x, y, width, height))


def measure_detail(
    data: Sequence[int],
    base_width: int,
    x: int,
    y: int,
    width: int,
    height: int,
    average: Pixel,
) -> float:
    """Mean per-channel Manhattan distance of a rectangle to ``average``."""
    return _detail(_region(_buffer_reader(data, base_width), x, y, width, height), average)


@dataclass(eq=False)
class QuadNode:
    """A rectangle of the image; split into up to four children when detailed.

    Children are ordered top-left, top-right, bottom-left, bottom-right; the
    right or bottom ones are None when the rectangle is one pixel wide or high.
    """

    x: int
    y: int
    width: int
    height: int
    pixel: Pixel = field(default_factory=Pixel)
    detail: float = 0.0
    children: list[QuadNode | None] | None = None

    @classmethod
    def from_buffer(
        cls,
        data: Sequence[int],
        base_width: int,
        x: int,
        y: int,
        width: int,
        height: int,
        threshold: int,
    ) -> QuadNode:
        """Build a tree over a packed RGB buffer that is ``base_width`` wide."""
        return cls._build(_buffer_reader(data, base_width), x, y, width, height, threshold)

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[Pixel]],
        x: int,
        y: int,
        width: int,
        height: int,
        threshold: int,
    ) -> QuadNode:
        """Build a tree over pixel rows indexed as ``rows[y][x]``."""
        return cls._build(lambda i, j: rows[j][i], x, y, width, height, threshold)

    @classmethod
    def _build(
        cls, at: _PixelAt, x: int, y: int, width: int, height: int, threshold: int
    ) -> QuadNode:
        if width <= 0 or height <= 0:
            raise ValueError(f"region {width}x{height} is empty")
        if threshold < 0:
            raise ValueError("threshold must not be negative")
        if width == 1 and height == 1:
            return cls(x, y, 1, 1, at(x, y), 0.0)

        pixels = _region(at, x, y, width, height)
        average = _average(pixels)
        node = cls(x, y, width, height, average, _detail(pixels, average))
        if node.detail <= threshold:
            return node

        right = width // 2
        bottom = height // 2
        left = width - right
        top = height - bottom
        node.children = [
            cls._build(at, x, y, left, top, threshold),
            cls._build(at, x + left, y, right, top, threshold) if right else None,
            cls._build(at, x, y + top, left, bottom, threshold) if bottom else None,
            cls._build(at, x + left, y + top, right, bottom, threshold)
            if right and bottom
            else None,
        ]
        return node

    def is_leaf(self) -> bool:
        """True when the node was not split."""
        return self.children is None

    def browse(self, threshold: float) -> Iterator[QuadNode]:
        """Yield the coarsest nodes whose detail is within ``threshold``.

        Leaves are yielded whatever their detail.
        """
        if self.detail <= threshold or self.is_leaf():
            yield self
            return
        for child in self.children:
            if child is not None:
                yield from child.browse(threshold)