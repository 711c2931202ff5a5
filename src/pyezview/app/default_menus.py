# ---------------------------------------------------------------------------
# File: default_menus.py
# ---------------------------------------------------------------------------
# Description:
#	Default viewer context menu for pyezview.
#
# Notes:
#	- Only the measurement menu has a real selector (a nearby tool object);
#	  the other menus are reached by id (delegation or sub-menu items).
#	- Finding/site items carry a "code" attr that is a key into the reference
#	  table returned alongside the menus.
#	- Shape of the customization value: {"menus": MenuSet, "references": {...}}
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/12/2026	Paul G. LeDuc				Initial coding / release
# 01/13/2026	Paul G. LeDuc				Add site sub-menu, hide it for arrow annotations
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any

from pyezview.menus.menu_defs import (
	ActionKind,
	CheckProps,
	MenuDef,
	MenuItemSpec,
	MenuSet,
)


VIEWER_CONTEXT = "VIEWER"

VIEWER_CONTEXT_MENU = "viewerContextMenu"

MEASUREMENT_MENU_ID = "measurementsContextMenu"
COMMON_FINDINGS_MENU_ID = "commonFindings"
FINDINGS_MENU_ID = "findingsMenu"
SITES_MENU_ID = "sitesMenu"

# Tools whose measurements have no anatomical site.
NO_SITE_TOOLS: frozenset[str] = frozenset({"ArrowAnnotate"})


FINDING_REFERENCES: dict[str, dict[str, Any]] = {
	"finding.abnormality": {"text": "Abnormality", "scheme": "local"},
	"finding.lesion": {"text": "Lesion", "scheme": "local"},
	"finding.mass": {"text": "Mass", "scheme": "local"},
	"finding.nodule": {"text": "Nodule", "scheme": "local"},
	"finding.cyst": {"text": "Cyst", "scheme": "local"},
}

SITE_REFERENCES: dict[str, dict[str, Any]] = {
	"site.brain": {"text": "Brain", "scheme": "local"},
	"site.lung": {"text": "Lung", "scheme": "local"},
	"site.liver": {"text": "Liver", "scheme": "local"},
	"site.kidney": {"text": "Kidney", "scheme": "local"},
}


def _has_nearby_object(props: CheckProps) -> bool:
	return props.get("nearbyToolData") is not None


def _never(props: CheckProps) -> bool:
	return False


def _has_site(props: CheckProps) -> bool:
	return props.get("toolName") not in NO_SITE_TOOLS


def _coded_items(prefix: str, command_name: str, keys: list[str]) -> tuple[MenuItemSpec, ...]:
	return tuple(
		MenuItemSpec(
			id=f"{prefix}:{key}",
			command_name=command_name,
			context=VIEWER_CONTEXT,
			attrs={"code": key},
		)
		for key in keys
	)


def build_viewer_menus() -> MenuSet:
	"""
	Build (and validate) the default viewer menus.
	"""
	measurement_menu = MenuDef(
		id=MEASUREMENT_MENU_ID,
		selector=_has_nearby_object,
		items=(
			MenuItemSpec(
				id="delete",
				label="Delete measurement",
				command_name="deleteMeasurement",
				context=VIEWER_CONTEXT,
			),
			MenuItemSpec(
				id="label",
				label="Add Label",
				command_name="setLabel",
				context=VIEWER_CONTEXT,
			),
			MenuItemSpec(
				id="common-findings",
				delegating=True,
				sub_menu_id=COMMON_FINDINGS_MENU_ID,
			),
			MenuItemSpec(
				id="finding",
				label="Finding...",
				action_kind=ActionKind.SUB_MENU,
				sub_menu_id=FINDINGS_MENU_ID,
			),
			MenuItemSpec(
				id="site",
				label="Site...",
				action_kind=ActionKind.SUB_MENU,
				sub_menu_id=SITES_MENU_ID,
				check_function=_has_site,
			),
		),
	)

	common_findings = MenuDef(
		id=COMMON_FINDINGS_MENU_ID,
		selector=_never,
		reference_attribute="code",
		items=_coded_items("common", "setFinding", ["finding.abnormality", "finding.lesion"]),
	)

	findings_menu = MenuDef(
		id=FINDINGS_MENU_ID,
		selector=_never,
		reference_attribute="code",
		items=_coded_items("findings", "setFinding", list(FINDING_REFERENCES)),
	)

	sites_menu = MenuDef(
		id=SITES_MENU_ID,
		selector=_never,
		reference_attribute="code",
		items=_coded_items("sites", "setSite", list(SITE_REFERENCES)),
	)

	return MenuSet([measurement_menu, common_findings, findings_menu, sites_menu]).validate()


def build_viewer_context_menu() -> dict[str, Any]:
	"""
	Default value of the "viewerContextMenu" customization.
	"""
	return {
		"menus": build_viewer_menus(),
		"references": {**FINDING_REFERENCES, **SITE_REFERENCES},
	}
