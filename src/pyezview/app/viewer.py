# ---------------------------------------------------------------------------
# File: viewer.py
# ---------------------------------------------------------------------------
# Description:
#	Toolkit-free wiring of the pyezview viewer services.
#
# Notes:
#	- build_viewer() creates the registry, services, controller and router
#	  and registers the default viewer commands and customizations.
#	- ViewerApp (app.py) adds the Tk pieces: panel service, viewport, dialogs.
#	- Tests build a Viewer with a fake panel service and drive it headless.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/13/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from pyezview.app.commands import CommandRegistry
from pyezview.app.default_commands import (
	SERVICE_ACTIVE_VIEWPORT,
	SERVICE_CONTEXT_MENU,
	SERVICE_CUSTOMIZATIONS,
	SERVICE_LABEL_PROMPT,
	SERVICE_MEASUREMENTS,
	register_viewer_commands,
)
from pyezview.app.default_menus import VIEWER_CONTEXT_MENU, build_viewer_context_menu
from pyezview.app.interaction import (
	DEFAULT_SHOW_CONTEXT_MENU,
	SHOW_CONTEXT_MENU,
	InteractionRouter,
)
from pyezview.core.config import AppConfig
from pyezview.core.logging import get_app_logger
from pyezview.core.telemetry import Telemetry, get_telemetry
from pyezview.menus.controller import ContextMenuController
from pyezview.services.customization import ModeCustomizationService
from pyezview.services.measurements import Measurement, MeasurementService
from pyezview.services.panel import PanelService


_log = get_app_logger("viewer")


@dataclass(slots=True)
class Viewer:
	"""
	Viewer

	The wired-up, toolkit-free half of the application.
	"""
	cfg: AppConfig
	telemetry: Telemetry
	registry: CommandRegistry
	measurements: MeasurementService
	customizations: ModeCustomizationService
	context_menu: ContextMenuController
	router: InteractionRouter

	def set_panel_service(self, panel_service: Optional[PanelService]) -> None:
		self.context_menu.set_panel_service(panel_service)

	def set_active_viewport(self, provider: Optional[Callable[[], Any]]) -> None:
		self.registry.set_service(SERVICE_ACTIVE_VIEWPORT, provider)

	def set_label_prompt(self, prompt: Optional[Callable[[Measurement], Optional[str]]]) -> None:
		self.registry.set_service(SERVICE_LABEL_PROMPT, prompt)


def build_viewer(
	cfg: AppConfig | None = None,
	*,
	telemetry: Optional[Telemetry] = None,
	panel_service: Optional[PanelService] = None,
	measurements: Optional[MeasurementService] = None,
) -> Viewer:
	cfg = cfg or AppConfig()
	tel = telemetry or get_telemetry()

	measurements = measurements or MeasurementService()

	customizations = ModeCustomizationService.from_config(cfg)
	customizations.register_default(SHOW_CONTEXT_MENU, DEFAULT_SHOW_CONTEXT_MENU)
	customizations.register_default(VIEWER_CONTEXT_MENU, build_viewer_context_menu())

	registry = CommandRegistry(telemetry=tel)
	context_menu = ContextMenuController(registry, panel_service, telemetry=tel)

	registry.set_service(SERVICE_MEASUREMENTS, measurements)
	registry.set_service(SERVICE_CONTEXT_MENU, context_menu)
	registry.set_service(SERVICE_CUSTOMIZATIONS, customizations)

	register_viewer_commands(registry)

	router = InteractionRouter.from_config(registry, customizations, cfg, telemetry=tel)

	_log.info("Viewer wired with %d commands", len(registry.names()))

	return Viewer(
		cfg=cfg,
		telemetry=tel,
		registry=registry,
		measurements=measurements,
		customizations=customizations,
		context_menu=context_menu,
		router=router,
	)
