# ---------------------------------------------------------------------------
# File: context_panel.py
# ---------------------------------------------------------------------------
# Description:
#	Tk floating panel service for the context menu.
#
# Notes:
#	- One borderless Toplevel per panel id, placed at the requested screen
#	  position, with one ttk button per resolved item.
#	- Showing a panel id that is already visible replaces it.
#	- Escape or focus leaving the panel counts as a click outside.
#	- Optional ttkthemes theme ("panel.theme" in cfg).
#	- Widget creation goes through small hooks so tests can run headless
#	  (tests subclass and replace them).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/13/2026	Paul G. LeDuc				Initial coding / release
# 01/14/2026	Paul G. LeDuc				Ignore focus-out from replaced panels
# 01/15/2026	Paul G. LeDuc				Keep panel open while focus moves to its buttons
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Callable, Optional

import tkinter as tk
from tkinter import ttk

from ttkthemes import ThemedStyle

from pyezview.core.logging import get_app_logger
from pyezview.menus.position import Position
from pyezview.services.panel import PanelRequest


_log = get_app_logger("panel")


def focus_within(window: tk.Misc) -> bool:
	"""
	True if the keyboard focus is on window or one of its descendants.
	"""
	focused = window.focus_get()
	if focused is None:
		return False
	path = str(focused)
	own = str(window)
	return path == own or path.startswith(own + ".")


class TkPanelService:
	"""
	TkPanelService

	PanelService implementation backed by Tk Toplevel windows.
	"""

	def __init__(self, master: Optional[tk.Misc], *, theme: Optional[str] = None) -> None:
		self._master = master
		self._theme = theme
		self._style: Optional[ThemedStyle] = None
		self._windows: dict[str, Any] = {}

	def is_visible(self, panel_id: str) -> bool:
		return panel_id in self._windows

	def show(self, request: PanelRequest) -> None:
		self.dismiss(request.id)

		window = self._create_window(request.position)
		container = self._create_container(window)

		for item in request.items:
			self._add_item(
				container,
				text=item.label or item.id,
				command=lambda it=item: it.activate(request.target),
			)

		self._windows[request.id] = window
		self._bind_dismiss(
			window,
			lambda: self._on_outside(request.id, window, request.on_click_outside),
		)

	def dismiss(self, panel_id: str) -> None:
		window = self._windows.pop(panel_id, None)
		if window is not None:
			self._destroy_window(window)

	def _on_outside(self, panel_id: str, window: Any, callback: Callable[[], None]) -> None:
		# Late focus-out events from a replaced window must not close its successor.
		if self._windows.get(panel_id) is not window:
			return
		callback()

	# -----------------------------------------------------------------------
	# Tk hooks
	# -----------------------------------------------------------------------

	def _apply_theme(self) -> None:
		if not self._theme or self._style is not None or self._master is None:
			return
		style = ThemedStyle(self._master)
		if self._theme not in style.get_themes():
			_log.warning("Unknown panel theme %r; keeping default", self._theme)
		else:
			style.set_theme(self._theme)
		self._style = style

	def _create_window(self, position: Position) -> Any:
		self._apply_theme()
		window = tk.Toplevel(self._master)
		window.overrideredirect(True)
		window.geometry(f"+{int(position.x)}+{int(position.y)}")
		return window

	def _create_container(self, window: Any) -> Any:
		frame = ttk.Frame(window, padding=2)
		frame.pack(fill="both", expand=True)
		return frame

	def _add_item(self, container: Any, *, text: str, command: Callable[[], None]) -> None:
		ttk.Button(container, text=text, command=command).pack(fill="x")

	def _bind_dismiss(self, window: Any, callback: Callable[[], None]) -> None:
		window.bind("<Escape>", lambda _e: callback())
		# Toplevel bindings also fire for the item buttons (bindtags)
		window.bind("<FocusOut>", lambda _e: self._on_focus_out(window, callback))
		window.focus_force()

	def _on_focus_out(self, window: Any, callback: Callable[[], None]) -> None:
		# Pressing an item button moves focus from the Toplevel to the button,
		# so only close once the focus change has settled outside the panel.
		(self._master or window).after_idle(self._dismiss_if_unfocused, window, callback)

	def _dismiss_if_unfocused(self, window: Any, callback: Callable[[], None]) -> None:
		if not window.winfo_exists() or focus_within(window):
			return
		callback()

	def _destroy_window(self, window: Any) -> None:
		window.destroy()
