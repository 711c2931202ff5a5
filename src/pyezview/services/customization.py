# ---------------------------------------------------------------------------
# File: customization.py
# ---------------------------------------------------------------------------
# Description:
#	Per-mode customization lookup for pyezview.
#
# Notes:
#	- Resolution order for get(name, fallback):
#		1) Mode override (set_mode_customization or cfg["customizations"])
#		2) Registered default (register_default)
#		3) fallback argument
#	- Values are opaque here (command bundles, menu definitions, ...).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/10/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Mapping, Optional

from pyezview.core.config import AppConfig


_MISSING = object()


class ModeCustomizationService:
	"""
	ModeCustomizationService

	Looks up named customizations, mode overrides first.
	"""

	def __init__(self, overrides: Optional[Mapping[str, Any]] = None) -> None:
		self._defaults: dict[str, Any] = {}
		self._overrides: dict[str, Any] = dict(overrides or {})

	@classmethod
	def from_config(cls, cfg: AppConfig) -> "ModeCustomizationService":
		return cls(overrides=cfg.section("customizations"))

	def register_default(self, name: str, value: Any) -> None:
		self._defaults[name] = value

	def set_mode_customization(self, name: str, value: Any) -> None:
		self._overrides[name] = value

	def clear_mode_customizations(self) -> None:
		self._overrides.clear()

	def get(self, name: str, fallback: Any = None) -> Any:
		value = self._overrides.get(name, _MISSING)
		if value is _MISSING:
			value = self._defaults.get(name, _MISSING)
		if value is _MISSING:
			return fallback
		return value
