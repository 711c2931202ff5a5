# ---------------------------------------------------------------------------
# File: viewport.py
# ---------------------------------------------------------------------------
# Description:
#	Viewport contract + interaction event for pyezview.
#
# Notes:
#	- The rendering engine is external; the menu core only needs a hit test and
#	  the element's screen origin.
#	- InteractionEvent is toolkit-agnostic (the Tk viewport builds one per click).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/10/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Protocol, runtime_checkable


Point = tuple[float, float]

BUTTON_PRIMARY = 1
BUTTON_MIDDLE = 2
BUTTON_SECONDARY = 3


@runtime_checkable
class ViewportLike(Protocol):
	"""
	Minimal interface the menu core needs from a viewport element.
	"""
	def bounding_box(self) -> Optional[Point]:
		"""Screen coordinates of the element's top-left corner (None if unknown)."""
		...

	def find_nearby_object(self, point: Optional[Point]) -> Any:
		"""Interactive object near a canvas point, or None."""
		...


@dataclass(frozen=True, slots=True)
class InteractionEvent:
	"""
	A pointer interaction on a viewport.

	- button:	Mouse button number (1 primary, 3 secondary).
	- client:	Screen coordinates (None if unknown).
	- canvas:	Element-relative coordinates (None if unknown).
	- element:	Viewport the event happened on.
	"""
	button: int
	client: Optional[Point] = None
	canvas: Optional[Point] = None
	element: Optional[ViewportLike] = None

	@property
	def is_secondary(self) -> bool:
		return self.button == BUTTON_SECONDARY
