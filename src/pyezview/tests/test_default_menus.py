# ---------------------------------------------------------------------------
# File: test_default_menus.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for the default viewer context menu definitions.
#
# Notes:
#	- Pure unit tests; no Tkinter dependency.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/12/2026	Paul G. LeDuc				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

from pyezview.app.default_menus import (
	COMMON_FINDINGS_MENU_ID,
	FINDING_REFERENCES,
	FINDINGS_MENU_ID,
	MEASUREMENT_MENU_ID,
	SITES_MENU_ID,
	build_viewer_context_menu,
	build_viewer_menus,
)
from pyezview.menus.menu_defs import ActionKind
from pyezview.menus.resolver import get_menu_items
from pyezview.services.measurements import Measurement


def _check_props(m: Measurement | None) -> dict:
	return {
		"toolName": getattr(m, "tool_name", None),
		"value": m,
		"uid": getattr(m, "uid", None),
		"nearbyToolData": m,
	}


def test_default_menus_validate_and_keep_order():
	menus = build_viewer_menus()

	assert menus.ids() == [MEASUREMENT_MENU_ID, COMMON_FINDINGS_MENU_ID, FINDINGS_MENU_ID, SITES_MENU_ID]


def test_no_nearby_object_shows_nothing():
	value = build_viewer_context_menu()

	assert get_menu_items(_check_props(None), None, value["menus"], value["references"]) is None


def test_measurement_menu_flattens_common_findings():
	value = build_viewer_context_menu()
	m = Measurement(uid="m1", tool_name="Length")

	items = get_menu_items(_check_props(m), None, value["menus"], value["references"])

	assert [i.id for i in items] == [
		"delete",
		"label",
		"common:finding.abnormality",
		"common:finding.lesion",
		"finding",
		"site",
	]
	assert items[2].label == "Abnormality"
	assert items[2].attrs["code"]["ref"] == "finding.abnormality"
	assert items[4].spec.action_kind is ActionKind.SUB_MENU


def test_arrow_annotations_have_no_site_item():
	value = build_viewer_context_menu()
	m = Measurement(uid="a1", tool_name="ArrowAnnotate")

	items = get_menu_items(_check_props(m), None, value["menus"], value["references"])

	assert "site" not in [i.id for i in items]


def test_findings_sub_menu_lists_all_findings():
	value = build_viewer_context_menu()
	m = Measurement(uid="m1", tool_name="Length")

	items = get_menu_items(_check_props(m), None, value["menus"], value["references"], FINDINGS_MENU_ID)

	assert [i.label for i in items] == [e["text"] for e in FINDING_REFERENCES.values()]
	assert all(i.spec.command_name == "setFinding" for i in items)
