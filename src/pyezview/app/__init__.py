# ---------------------------------------------------------------------------
# File: app/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public app package surface for pyezview.
#
# Notes:
#   - Uses lazy exports so the menu core can import app.commands / app.errors
#     without pulling in Tk.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"ViewerApp",
	"Viewer", "build_viewer",
	"Command", "CommandCall", "CommandContext", "CommandCustomization", "CommandRegistry",
	"InteractionRouter",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"ViewerApp": ("pyezview.app.app", "ViewerApp"),
	"Viewer": ("pyezview.app.viewer", "Viewer"),
	"build_viewer": ("pyezview.app.viewer", "build_viewer"),
	"Command": ("pyezview.app.commands", "Command"),
	"CommandCall": ("pyezview.app.commands", "CommandCall"),
	"CommandContext": ("pyezview.app.commands", "CommandContext"),
	"CommandCustomization": ("pyezview.app.commands", "CommandCustomization"),
	"CommandRegistry": ("pyezview.app.commands", "CommandRegistry"),
	"InteractionRouter": ("pyezview.app.interaction", "InteractionRouter"),
}

def __getattr__(name: str) -> Any:
	try:
		mod_name, attr_name = _EXPORTS[name]
	except KeyError as ex:
		raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from ex

	import importlib
	mod = importlib.import_module(mod_name)
	return getattr(mod, attr_name)

def __dir__() -> list[str]:
	return sorted(set(list(globals().keys()) + list(__all__)))

if TYPE_CHECKING:
	from pyezview.app.app import ViewerApp
	from pyezview.app.viewer import Viewer, build_viewer
	from pyezview.app.commands import (
		Command, CommandCall, CommandContext, CommandCustomization, CommandRegistry,
	)
	from pyezview.app.interaction import InteractionRouter
