# ---------------------------------------------------------------------------
# File: viewport.py
# ---------------------------------------------------------------------------
# Description:
#	ViewportView component for pyezview (Tk canvas viewport).
#
# Notes:
#	- Implements ViewportLike (bounding_box / find_nearby_object) so it can be
#	  handed to the context menu core as the viewer element.
#	- Mouse clicks become InteractionEvents and go to the InteractionRouter.
#	- Draws measurements from the MeasurementService; redraws on change.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/13/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

import tkinter as tk

from pyezview.core.logging import get_app_logger
from pyezview.services.measurements import Measurement, MeasurementService, MeasurementsSnapshot
from pyezview.services.viewport import InteractionEvent, Point
from pyezview.ui.component import Component


_log = get_app_logger("viewport")

_POINT_RADIUS = 3


@dataclass
class ViewportView(Component):
	"""
	ViewportView

	Canvas-based viewport that shows measurements and routes clicks.
	"""
	measurements: Optional[MeasurementService] = None
	router: Any = None		# InteractionRouter (kept loose to avoid an app -> ui import cycle)

	width: int = 640
	height: int = 480
	tolerance: float = 8.0

	background: str = "black"
	color: str = "lime green"
	selected_color: str = "yellow"

	canvas: Optional[tk.Canvas] = field(default=None, init=False)

	# -----------------------------------------------------------------------
	# Component
	# -----------------------------------------------------------------------

	def build(self, parent: tk.Misc) -> tk.Widget:
		canvas = tk.Canvas(
			parent,
			width=self.width,
			height=self.height,
			background=self.background,
			highlightthickness=0,
		)
		for button in (1, 2, 3):
			canvas.bind(f"<ButtonPress-{button}>", self._on_click)
		self.canvas = canvas

		if self.measurements is not None:
			self.measurements.set_on_change(self._on_measurements_changed)

		return canvas

	def redraw(self) -> None:
		if self.canvas is None:
			return

		self.canvas.delete("measurement")
		if self.measurements is None:
			return

		selected = self.measurements.selected()
		for m in self.measurements.all():
			color = self.selected_color if selected is not None and selected.uid == m.uid else self.color
			self._draw_measurement(m, color)

	def destroy(self) -> None:
		if self.measurements is not None:
			self.measurements.set_on_change(None)
		self.canvas = None
		super().destroy()

	# -----------------------------------------------------------------------
	# ViewportLike
	# -----------------------------------------------------------------------

	def bounding_box(self) -> Optional[Point]:
		if self.root is None:
			return None
		return (float(self.root.winfo_rootx()), float(self.root.winfo_rooty()))

	def find_nearby_object(self, point: Optional[Point]) -> Optional[Measurement]:
		if self.measurements is None:
			return None
		return self.measurements.find_near(point, self.tolerance)

	# -----------------------------------------------------------------------
	# Events
	# -----------------------------------------------------------------------

	def make_event(self, tk_event: Any) -> InteractionEvent:
		return InteractionEvent(
			button=int(tk_event.num),
			client=(float(tk_event.x_root), float(tk_event.y_root)),
			canvas=(float(tk_event.x), float(tk_event.y)),
			element=self,
		)

	def _on_click(self, tk_event: Any) -> None:
		if self.router is None:
			return
		event = self.make_event(tk_event)
		_log.debug("Viewport click button=%s canvas=%s", event.button, event.canvas)
		self.router.route_click(event)

	def _on_measurements_changed(self, snapshot: MeasurementsSnapshot) -> None:
		self.redraw()

	# -----------------------------------------------------------------------
	# Drawing
	# -----------------------------------------------------------------------

	def _draw_measurement(self, m: Measurement, color: str) -> None:
		assert self.canvas is not None

		if len(m.points) > 1:
			flat = [c for p in m.points for c in p]
			self.canvas.create_line(*flat, fill=color, width=2, tags=("measurement", m.uid))

		r = _POINT_RADIUS
		for x, y in m.points:
			self.canvas.create_oval(x - r, y - r, x + r, y + r, outline=color, tags=("measurement", m.uid))

		if m.points and m.label:
			x, y = m.points[0]
			self.canvas.create_text(
				x + 2 * r, y - 2 * r,
				text=m.label,
				fill=color,
				anchor="sw",
				tags=("measurement", m.uid),
			)
