# ---------------------------------------------------------------------------
# File: position.py
# ---------------------------------------------------------------------------
# Description:
#	Screen position resolution for context menus.
#
# Notes:
#	- resolve_position() walks an ordered list of producers and stops at the
#	  first one that yields numeric x and y. Later producers are not called.
#	- Default chain:
#		1) Canvas points of the nearby object + viewport origin
#		2) Client point of the triggering event
#		3) Viewport origin
#		4) (0, 0)
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/09/2026	Paul G. LeDuc				Initial coding / release
# 01/11/2026	Paul G. LeDuc				Accept mapping points ({"x", "y"})
# ---------------------------------------------------------------------------

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence


@dataclass(frozen=True, slots=True)
class Position:
	x: float
	y: float

	def offset(self, other: "Position") -> "Position":
		return Position(self.x + other.x, self.y + other.y)


ORIGIN = Position(0, 0)

PositionProducer = Callable[[], Any]


def _is_number(value: Any) -> bool:
	return isinstance(value, numbers.Real) and not isinstance(value, bool)


def to_position(value: Any) -> Optional[Position]:
	"""
	Coerce a candidate into a Position, or None when x/y are not both numeric.

	Accepts Position, {"x": .., "y": ..} mappings, (x, y) sequences, and objects
	with x/y attributes.
	"""
	if value is None:
		return None

	if isinstance(value, Position):
		x, y = value.x, value.y
	elif isinstance(value, Mapping):
		x, y = value.get("x"), value.get("y")
	elif isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
		if len(value) < 2:
			return None
		x, y = value[0], value[1]
	else:
		x, y = getattr(value, "x", None), getattr(value, "y", None)

	if _is_number(x) and _is_number(y):
		return value if isinstance(value, Position) else Position(x, y)
	return None


def resolve_position(candidates: Iterable[PositionProducer]) -> Optional[Position]:
	"""
	Return the first valid position produced by candidates (in order).

	Returns None when no candidate is valid.
	"""
	for produce in candidates:
		pos = to_position(produce())
		if pos is not None:
			return pos
	return None


# ---------------------------------------------------------------------------
# Candidate sources
# ---------------------------------------------------------------------------

def element_origin(element: Any) -> Optional[Position]:
	"""
	Screen origin of a viewport element (via element.bounding_box()).
	"""
	if element is None:
		return None
	bounding_box = getattr(element, "bounding_box", None)
	if not callable(bounding_box):
		return None
	return to_position(bounding_box())


def event_position(event: Any) -> Optional[Position]:
	"""
	Client (screen) point carried by an interaction event.
	"""
	if event is None:
		return None
	if isinstance(event, Mapping):
		return to_position(event.get("client"))
	return to_position(getattr(event, "client", None))


def canvas_points_position(points: Optional[Sequence[Any]], element: Any) -> Optional[Position]:
	"""
	First canvas point translated to screen space by the element origin.
	"""
	if not points:
		return None

	origin = element_origin(element)
	if origin is None:
		return None

	for point in points:
		pos = to_position(point)
		if pos is not None:
			return pos.offset(origin)
	return None


def default_position_chain(
	canvas_points: Optional[Sequence[Any]] = None,
	event: Any = None,
	element: Any = None,
	*,
	anchor: Optional[Position] = None,
) -> list[PositionProducer]:
	"""
	Producers in priority order. An explicit anchor, when given, comes first.
	"""
	chain: list[PositionProducer] = []
	if anchor is not None:
		chain.append(lambda: anchor)
	chain.extend([
		lambda: canvas_points_position(canvas_points, element),
		lambda: event_position(event),
		lambda: element_origin(element),
		lambda: ORIGIN,
	])
	return chain


def resolve_default_position(
	canvas_points: Optional[Sequence[Any]] = None,
	event: Any = None,
	element: Any = None,
	*,
	anchor: Optional[Position] = None,
) -> Position:
	pos = resolve_position(default_position_chain(canvas_points, event, element, anchor=anchor))
	return pos if pos is not None else ORIGIN
