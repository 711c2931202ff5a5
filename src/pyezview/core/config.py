# ---------------------------------------------------------------------------
# File: config.py
# ---------------------------------------------------------------------------
# Description:
#	AppConfig for pyezview.
#
# Notes:
#	- Flat dict of options; keys may be dotted ("logging.level", "panel.theme").
#	- Moved out of app.py so services and commands can read config without Tk.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/08/2026	Paul G. LeDuc				Initial coding / release
# 01/10/2026	Paul G. LeDuc				Add section() for nested option blocks
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True, slots=True)
class AppConfig:
	"""
	Light wrapper for config options.
	"""
	options: Mapping[str, Any] | None = None

	def get(self, key: str, default: Any = None) -> Any:
		if self.options is None:
			return default
		return self.options.get(key, default)

	def section(self, key: str) -> dict[str, Any]:
		"""
		Return a nested mapping option as a plain dict ({} when missing or not a mapping).
		"""
		value = self.get(key, None)
		if isinstance(value, Mapping):
			return dict(value)
		return {}
