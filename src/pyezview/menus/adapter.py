# ---------------------------------------------------------------------------
# File: adapter.py
# ---------------------------------------------------------------------------
# Description:
#	Menu item adapter: MenuItemSpec + session props -> ResolvedMenuItem.
#
# Notes:
#	- Reference substitution replaces the item's reference attribute with a copy
#	  of the reference table entry, stamped with "ref" = original key.
#	- A missing reference entry is logged and the item is shown unresolved.
#	- Only string keys are looked up; an inline reference object is left as is
#	  and supplies the label text.
#	- The default action closes the panel, then hands the item to the target
#	  handler for its ActionKind. No handler = warning, no-op.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/10/2026	Paul G. LeDuc				Initial coding / release
# 01/11/2026	Paul G. LeDuc				Dispatch activation by ActionKind
# 01/15/2026	Paul G. LeDuc				Skip lookup for inline reference objects
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import replace
from typing import Any, Mapping, Optional

from pyezview.core.logging import get_app_logger
from pyezview.menus.menu_defs import (
	ActivationTarget,
	MenuItemSpec,
	ReferenceTable,
	ResolvedMenuItem,
	SessionProps,
)


_log = get_app_logger("menus")


def reference_text(entry: Any) -> Optional[str]:
	"""
	Display text of a reference table entry (mapping["text"] or entry.text).
	"""
	if entry is None:
		return None
	if isinstance(entry, Mapping):
		text = entry.get("text")
	else:
		text = getattr(entry, "text", None)
	return None if text is None else str(text)


def parse_item_references(
	reference_attribute: Optional[str],
	item: MenuItemSpec,
	references: Optional[ReferenceTable],
) -> tuple[MenuItemSpec, Optional[str]]:
	"""
	Replace the item's reference attribute with its reference table entry.

	Returns:
		(item, label_ref) where item is a new spec when a substitution happened,
		and label_ref is the entry's display text.
	"""
	if not reference_attribute or reference_attribute not in item.attrs:
		return item, None

	key = item.attrs[reference_attribute]
	if not isinstance(key, str):
		# Inline reference object (or no key); adapt_item reads its text
		return item, None

	entry = references.get(key) if references else None
	if not entry:
		_log.info("Missing reference for %s=%r on menu item %r", reference_attribute, key, item.id)
		return item, None

	if isinstance(entry, Mapping):
		linked: Any = {**entry, "ref": key}
	else:
		linked = {"text": reference_text(entry), "value": entry, "ref": key}

	attrs = dict(item.attrs)
	attrs[reference_attribute] = linked
	return replace(item, attrs=attrs), reference_text(linked)


def _default_action(item: ResolvedMenuItem, target: ActivationTarget) -> None:
	target.close()

	kind = item.spec.action_kind
	handler = target.handler_for(kind)
	if handler is None:
		_log.warning("No %s action handler for menu item %r", kind.value, item.id)
		return

	handler(item, item.spec, item.session_props)


def adapt_item(
	reference_attribute: Optional[str],
	item: MenuItemSpec,
	session_props: SessionProps,
	references: Optional[ReferenceTable] = None,
) -> ResolvedMenuItem:
	"""
	Build a displayable, activatable item from its spec.
	"""
	spec, label_ref = parse_item_references(reference_attribute, item, references)

	label = spec.label
	if not label and reference_attribute:
		label = reference_text(spec.attrs.get(reference_attribute))

	check_props = session_props.check_props or {}
	event = session_props.event

	return ResolvedMenuItem(
		spec=spec,
		source=item,
		session_props=session_props,
		label=label or None,
		label_ref=label_ref,
		value=check_props.get("value"),
		element=getattr(event, "element", None),
		action=spec.action or _default_action,
	)
