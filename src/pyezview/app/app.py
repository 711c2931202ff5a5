# ---------------------------------------------------------------------------
# File: app.py
# ---------------------------------------------------------------------------
# Description:
#   Main window for the pyezview app.
#
# Notes:
#	- Owns logging/telemetry init, the Viewer wiring and the Tk components.
#	- The active viewport is the most recently added ViewportView.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 12/17/2025	Paul G. LeDuc				Initial coding / release
# 12/18/2025	Paul G. LeDuc				Add ctor args + geometry guards
# 12/26/2025	Paul G. LeDuc				Add component management lifecycle
# 01/13/2026	Paul G. LeDuc				Rework as ViewerApp (context menu wiring)
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Optional

import tkinter as tk
from tkinter import ttk

from pyezview.app.viewer import Viewer, build_viewer
from pyezview.core.config import AppConfig
from pyezview.core.logging import get_app_logger, init_logging
from pyezview.core.telemetry import init_telemetry
from pyezview.ui.component import Component
from pyezview.ui.context_panel import TkPanelService
from pyezview.ui.dialogs import make_label_prompt
from pyezview.ui.viewport import ViewportView


class ViewerApp(tk.Tk):
	"""
	ViewerApp

	Main application class for pyezview.
	Root container for viewports; hosts the context menu panel.
	"""

	def __init__(
		self,
		width: int | None = None,
		height: int | None = None,
		title: str | None = None,
		cfg: dict[str, Any] | None = None,
	) -> None:
		super().__init__()

		self.cfg = AppConfig(cfg)
		init_logging(self.cfg)
		self._log = get_app_logger()

		self.telemetry = init_telemetry(self.cfg, self._log)

		self.title_text = title or "pyezview"
		self.title(self.title_text)

		# -------------------------------------------------------------------
		# Viewer wiring (commands, services, context menu, router)
		# -------------------------------------------------------------------

		self.panel_service = TkPanelService(self, theme=self.cfg.get("panel.theme"))
		self.viewer: Viewer = build_viewer(
			self.cfg,
			telemetry=self.telemetry,
			panel_service=self.panel_service,
		)
		self.viewer.set_label_prompt(make_label_prompt(self))
		self.viewer.set_active_viewport(self.active_viewport)

		# -------------------------------------------------------------------
		# Components
		# -------------------------------------------------------------------

		self.components: list[Component] = []
		self._components_by_id: dict[str, Component] = {}

		self.update_idletasks()
		self._apply_geometry(width, height)

		self.root_frame = ttk.Frame(self)
		self.root_frame.pack(fill="both", expand=True)

		self._log.info("%s started", self.title_text)

	# -----------------------------------------------------------------------
	# Components
	# -----------------------------------------------------------------------

	def add_component(self, component: Component) -> None:
		if component.id in self._components_by_id:
			raise ValueError(f"Duplicate component id {component.id!r}")

		self.components.append(component)
		self._components_by_id[str(component.id)] = component

		component.mount(self.root_frame)
		component.layout()
		component.redraw()

	def add_viewport(self, **kwargs: Any) -> ViewportView:
		"""
		Create a ViewportView bound to the viewer's measurements and router.
		"""
		viewport = ViewportView(
			measurements=self.viewer.measurements,
			router=self.viewer.router,
			**kwargs,
		)
		self.add_component(viewport)
		return viewport

	def remove_component(self, component: Component) -> None:
		if component not in self.components:
			return

		component.destroy()
		self.components.remove(component)
		self._components_by_id.pop(str(component.id), None)

	def get_component(self, component_id: str) -> Optional[Component]:
		return self._components_by_id.get(component_id)

	def active_viewport(self) -> Optional[ViewportView]:
		for component in reversed(self.components):
			if isinstance(component, ViewportView) and component.is_mounted:
				return component
		return None

	# -----------------------------------------------------------------------
	# Window setup
	# -----------------------------------------------------------------------

	def _apply_geometry(self, width: int | None, height: int | None) -> None:
		screen_w = self.winfo_screenwidth()
		screen_h = self.winfo_screenheight()

		if width is None and height is None:
			win_w = screen_w
			win_h = screen_h
		else:
			req_w = width if width is not None else screen_w
			req_h = height if height is not None else screen_h

			win_w = max(1, min(req_w, screen_w))
			win_h = max(1, min(req_h, screen_h))

		x = max(0, (screen_w - win_w) // 2)
		y = max(0, (screen_h - win_h) // 2)

		self.geometry(f"{win_w}x{win_h}+{x}+{y}")

	# -----------------------------------------------------------------------
	# Runtime
	# -----------------------------------------------------------------------

	def run(self) -> None:
		"""
		Run the Tk event loop.
		"""
		self.mainloop()

	def destroy(self) -> None:
		self.viewer.context_menu.close()
		super().destroy()

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} title={self.title_text!r}>"
