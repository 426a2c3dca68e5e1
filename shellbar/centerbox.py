"""A three-slot horizontal layout: left and right at the edges, the middle centred."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Protocol


class Alignment(Enum):
    START = "start"
    CENTER = "center"
    END = "end"


@dataclass(frozen=True)
class Length:
    """How much room an element wants along one axis.

    A positive ``portion`` means the element fills the space it is given,
    weighted by that portion; ``fixed`` asks for an exact amount; neither
    means the element shrinks to its content.
    """

    portion: int = 0
    fixed: float | None = None

    def __post_init__(self) -> None:
        if self.portion < 0:
            raise ValueError("fill portion cannot be negative")
        if self.portion and self.fixed is not None:
            raise ValueError("a length cannot both fill and be fixed")

    @classmethod
    def fill(cls, portion: int = 1) -> Length:
        if portion < 1:
            raise ValueError("fill portion must be at least 1")
        return cls(portion=portion)

    @classmethod
    def shrink(cls) -> Length:
        return cls()

    @classmethod
    def of(cls, amount: float) -> Length:
        return cls(fixed=float(amount))

    @property
    def is_shrink(self) -> bool:
        return self.portion == 0 and self.fixed is None

    def fill_factor(self) -> int:
        """The fill weight: zero for shrinking and fixed lengths."""
        return self.portion

    def _resolve(self, low: float, high: float, intrinsic: float) -> float:
        if self.portion:
            return high
        wanted = intrinsic if self.fixed is None else self.fixed
        return max(min(wanted, high), low)


@dataclass(frozen=True)
class Padding:
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0

    def horizontal(self) -> float:
        return self.left + self.right

    def vertical(self) -> float:
        return self.top + self.bottom


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class Limits:
    """The smallest and largest size an element may take."""

    min: Size
    max: Size

    def _constrain(self, width: Length, height: Length) -> Limits:
        low, high = self.min, self.max
        if width.fixed is not None:
            w = max(min(width.fixed, high.width), low.width)
            low, high = Size(w, low.height), Size(w, high.height)
        if height.fixed is not None:
            h = max(min(height.fixed, high.height), low.height)
            low, high = Size(low.width, h), Size(high.width, h)
        return Limits(low, high)

    def _shrink(self, padding: Padding) -> Limits:
        dw, dh = padding.horizontal(), padding.vertical()
        return Limits(
            Size(max(self.min.width - dw, 0.0), max(self.min.height - dh, 0.0)),
            Size(max(self.max.width - dw, 0.0), max(self.max.height - dh, 0.0)),
        )

    def resolve(self, width: Length, height: Length, intrinsic: Size) -> Size:
        """The size an element of the given lengths and content takes within these limits."""
        return Size(
            width._resolve(self.min.width, self.max.width, intrinsic.width),
            height._resolve(self.min.height, self.max.height, intrinsic.height),
        )


@dataclass(frozen=True)
class Node:
    """A laid-out element: its size, its position within its parent and its children."""

    size: Size = Size(0.0, 0.0)
    x: float = 0.0
    y: float = 0.0
    children: tuple[Node, ...] = ()

    @property
    def width(self) -> float:
        return self.size.width

    @property
    def height(self) -> float:
        return self.size.height

    def _moved_to(self, x: float, y: float) -> Node:
        return replace(self, x=x, y=y)

    def align(self, horizontal: Alignment, vertical: Alignment, space: Size) -> Node:
        """Shift the node so it sits at the given alignment within ``space``."""
        return replace(
            self,
            x=self.x + _offset(horizontal, space.width, self.width),
            y=self.y + _offset(vertical, space.height, self.height),
        )


def _offset(alignment: Alignment, space: float, extent: float) -> float:
    if alignment is Alignment.CENTER:
        return (space - extent) / 2.0
    if alignment is Alignment.END:
        return space - extent
    return 0.0


class _Child(Protocol):
    height: Length

    def layout(self, limits: Limits) -> Node: ...


@dataclass(frozen=True)
class FixedChild:
    """A leaf element with a known content size."""

    intrinsic: Size
    width: Length = field(default_factory=Length.shrink)
    height: Length = field(default_factory=Length.shrink)

    def layout(self, limits: Limits) -> Node:
        return Node(limits.resolve(self.width, self.height, self.intrinsic))


_LAYOUT_ORDER = (0, 2, 1)


@dataclass(frozen=True)
class Centerbox:
    """Places three children: one at the start, one at the end, one in the middle.

    The middle child is centred on the whole box when it fits, and otherwise
    centred in the gap the edge children leave.
    """

    children: tuple[_Child, _Child, _Child]
    spacing: float = 0.0
    padding: Padding = field(default_factory=Padding)
    width: Length = field(default_factory=Length.shrink)
    height: Length = field(default_factory=Length.shrink)
    align_items: Alignment = Alignment.START

    def __post_init__(self) -> None:
        children = tuple(self.children)
        if len(children) != 3:
            raise ValueError(f"a centerbox holds exactly 3 children, got {len(children)}")
        object.__setattr__(self, "children", children)

    def layout(self, limits: Limits) -> Node:
        pad = self.padding
        inner = limits._constrain(self.width, self.height)._shrink(pad)
        total_spacing = self.spacing * 2
        max_cross = inner.max.height
        cross = 0.0 if self.height.is_shrink else max_cross
        available = inner.max.width - total_spacing
        remaining = 0.0 if self.width.is_shrink else max(available, 0.0)

        nodes = [Node(), Node(), Node()]
        for index in _LAYOUT_ORDER:
            child = self.children[index]
            max_height = cross if child.height.fill_factor() else max_cross
            node = child.layout(Limits(Size(0.0, 0.0), Size(remaining, max_height)))
            remaining -= node.width
            cross = max(cross, node.height)
            nodes[index] = node

        left, center, right = nodes
        cross_space = Size(0.0, cross)
        left = left._moved_to(pad.left, pad.top).align(
            Alignment.START, self.align_items, cross_space
        )
        right = right._moved_to(inner.max.width + pad.right, pad.top).align(
            Alignment.END, self.align_items, cross_space
        )

        half_available = available / 2.0
        half_center = center.width / 2.0
        if half_available - left.width < half_center or half_available - right.width < half_center:
            center_x = (
                pad.left
                + self.spacing
                + left.width
                + (available - left.width - right.width) / 2.0
            )
        else:
            center_x = inner.max.width / 2.0 + pad.horizontal() / 2.0
        center = center._moved_to(center_x, pad.top).align(
            Alignment.CENTER, self.align_items, cross_space
        )

        main = left.width + center.width + right.width + total_spacing
        size = inner.resolve(self.width, self.height, Size(main, cross))
        return Node(
            Size(size.width + pad.horizontal(), size.height + pad.vertical()),
            children=(left, center, right),
        )