# ---------------------------------------------------------------------------
# File: ui/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public UI package surface for pyezview.
#
# Notes:
#   - Uses lazy exports to avoid circular imports (PEP 562).
#   - Do NOT import from pyezview.ui inside ui modules; import specific modules instead.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"Component",
	"TkPanelService",
	"ViewportView",
	"make_label_prompt",
	"prompt_measurement_label",
]

# Map public name -> (module, attribute)
_EXPORTS: dict[str, tuple[str, str]] = {
	"Component": ("pyezview.ui.component", "Component"),
	"TkPanelService": ("pyezview.ui.context_panel", "TkPanelService"),
	"ViewportView": ("pyezview.ui.viewport", "ViewportView"),
	"make_label_prompt": ("pyezview.ui.dialogs", "make_label_prompt"),
	"prompt_measurement_label": ("pyezview.ui.dialogs", "prompt_measurement_label"),
}

def __getattr__(name: str) -> Any:
	"""
	Lazy attribute resolver for pyezview.ui exports.
	"""
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
	from pyezview.ui.component import Component
	from pyezview.ui.context_panel import TkPanelService
	from pyezview.ui.viewport import ViewportView
	from pyezview.ui.dialogs import make_label_prompt, prompt_measurement_label
