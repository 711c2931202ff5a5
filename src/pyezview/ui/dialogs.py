# ---------------------------------------------------------------------------
# File: dialogs.py
# ---------------------------------------------------------------------------
# Description:
#	Dialog helpers for pyezview.
#
# Notes:
#	- Thin wrappers around tkinter.simpledialog.
#	- make_label_prompt() builds the "label_prompt" service used by setLabel.
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/06/2026	Paul G. LeDuc				Initial version
# 01/13/2026	Paul G. LeDuc				Replace not-implemented box with label prompt
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Callable, Optional
import tkinter as tk
from tkinter import simpledialog

from pyezview.services.measurements import Measurement


def prompt_measurement_label(
	measurement: Measurement,
	*,
	parent: tk.Misc | None = None,
) -> Optional[str]:
	"""
	Ask the user for a measurement label.

	Returns:
		The entered text, or None if the dialog was cancelled.
	"""
	kwargs = {"initialvalue": measurement.label}
	if parent is not None:
		kwargs["parent"] = parent

	return simpledialog.askstring(
		"Add Label",
		f"Label for {measurement.tool_name} measurement:",
		**kwargs,
	)


def make_label_prompt(parent: tk.Misc | None = None) -> Callable[[Measurement], Optional[str]]:
	def _prompt(measurement: Measurement) -> Optional[str]:
		return prompt_measurement_label(measurement, parent=parent)

	return _prompt
