# ---------------------------------------------------------------------------
# File: interaction.py
# ---------------------------------------------------------------------------
# Description:
#	InteractionRouter for pyezview (viewport clicks -> command execution).
#
# Notes:
#	- Toolkit-agnostic: routes InteractionEvents, the Tk viewport builds them.
#	- Context button click:
#		1) hit test through the getNearbyToolData command
#		2) run the mode's "showContextMenu" customization with
#		   {event, nearbyToolData} merged into each command call
#	- Any other click closes the context menu.
#	- Dispatch errors propagate; the Tk event handler decides what to do.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/01/2026	Paul G. LeDuc				Initial coding / release (KeyRouter)
# 01/12/2026	Paul G. LeDuc				Rework as InteractionRouter for viewport clicks
# 01/13/2026	Paul G. LeDuc				Configurable context button + telemetry
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from pyezview.app.commands import CommandCall, CommandCustomization, CommandRegistry
from pyezview.app.default_menus import VIEWER_CONTEXT, VIEWER_CONTEXT_MENU
from pyezview.core.config import AppConfig
from pyezview.core.telemetry import Telemetry, get_telemetry
from pyezview.services.customization import ModeCustomizationService
from pyezview.services.viewport import BUTTON_SECONDARY, InteractionEvent


SHOW_CONTEXT_MENU = "showContextMenu"

DEFAULT_SHOW_CONTEXT_MENU = CommandCustomization(commands=(
	CommandCall(
		command_name="showViewerContextMenu",
		command_options={"menuName": VIEWER_CONTEXT_MENU},
		context=VIEWER_CONTEXT,
	),
))


@dataclass(slots=True)
class InteractionRouter:
	"""
	InteractionRouter

	Routes viewport clicks:
	- context button -> show the context menu (per-mode command bundle)
	- anything else -> close the context menu
	"""
	registry: CommandRegistry
	customizations: ModeCustomizationService

	context_button: int = BUTTON_SECONDARY
	telemetry: Optional[Telemetry] = None

	@classmethod
	def from_config(
		cls,
		registry: CommandRegistry,
		customizations: ModeCustomizationService,
		cfg: AppConfig,
		telemetry: Optional[Telemetry] = None,
	) -> "InteractionRouter":
		button = cfg.get("interaction.context_button", BUTTON_SECONDARY)
		return cls(
			registry=registry,
			customizations=customizations,
			context_button=int(button),
			telemetry=telemetry,
		)

	def route_click(self, event: InteractionEvent) -> bool:
		"""
		Route a click.

		Returns:
			True if a context menu was requested, else False.
		"""
		tel = self.telemetry or get_telemetry()
		tel.counter("interaction.click", 1, {"button": event.button})

		if event.button != self.context_button:
			self.registry.run("closeViewerContextMenu")
			return False

		nearby = self.find_nearby(event)
		self.registry.run_commands(
			self.show_context_menu_customization(),
			{"event": event, "nearbyToolData": nearby},
		)
		return True

	def find_nearby(self, event: InteractionEvent) -> Any:
		if event.element is None:
			return None
		return self.registry.run(
			"getNearbyToolData",
			{"element": event.element, "canvasCoordinates": event.canvas},
			VIEWER_CONTEXT,
		)

	def show_context_menu_customization(self) -> CommandCustomization:
		value = self.customizations.get(SHOW_CONTEXT_MENU, DEFAULT_SHOW_CONTEXT_MENU)
		return CommandCustomization.from_value(value)
