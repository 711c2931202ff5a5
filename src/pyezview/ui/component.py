# ---------------------------------------------------------------------------
# File: component.py
# ---------------------------------------------------------------------------
# Description:
#	Base UI Component for pyezview (Tkinter).
#
# Notes:
#	- A component owns one root widget: mount() builds it, layout() places it,
#	  destroy() tears it down.
#	- Viewer components are leaves; the app owns the component list.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 12/26/2025	Paul G. LeDuc				Initial coding / release
# 12/30/2025	Paul G. LeDuc				Add optional id/name for components
# 12/30/2025	Paul G. LeDuc				Use tk.Misc for parent typing (Tk/Toplevel safe)
# 01/13/2026	Paul G. LeDuc				Drop child composition (viewer components are leaves)
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
from uuid import uuid4

import tkinter as tk
from tkinter import ttk


@dataclass
class Component:
	"""
	Base UI component.

	- id:	Stable identifier (auto-generated when not provided).
	- name:	Human-friendly label (defaults to class name).
	"""
	id: Optional[str] = None
	name: Optional[str] = None

	# tk.Misc is the common base for Tk, Toplevel, and all widgets.
	parent: Optional[tk.Misc] = field(default=None, init=False)
	root: Optional[tk.Widget] = field(default=None, init=False)

	def __post_init__(self) -> None:
		if not self.id:
			self.id = str(uuid4())
		if not self.name:
			self.name = self.__class__.__name__

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} id={self.id!r} name={self.name!r}>"

	@property
	def is_mounted(self) -> bool:
		return self.root is not None

	def mount(self, parent: tk.Misc) -> None:
		self.parent = parent
		self.root = self.build(parent)

	def build(self, parent: tk.Misc) -> tk.Widget:
		"""
		Create this component's root widget. Default is an empty Frame.
		"""
		return ttk.Frame(parent)

	def layout(self) -> None:
		if self.root is None:
			return
		self.root.pack(fill="both", expand=True)

	def redraw(self) -> None:
		if self.root is not None:
			self.root.update_idletasks()

	def destroy(self) -> None:
		if self.root is not None:
			self.root.destroy()
			self.root = None
