# ---------------------------------------------------------------------------
# File: __init__.py
# Description:
#	Public service exports for pyezview.
#
#	Services are the collaborators commands reach through CommandContext.services:
#	measurement records, the floating panel, mode customizations, and the
#	viewport contract.
#
# Notes:
#	- Services should not depend directly on Tk widgets.
#	- The app constructs and wires service instances.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/03/2026	Paul G. LeDuc				Initial coding / release
# 01/10/2026	Paul G. LeDuc				Replace StatusService with viewer services
# ---------------------------------------------------------------------------

from .customization import ModeCustomizationService
from .measurements import Measurement, MeasurementService
from .panel import PanelRequest, PanelService
from .viewport import InteractionEvent, ViewportLike

__all__ = [
	"InteractionEvent",
	"Measurement",
	"MeasurementService",
	"ModeCustomizationService",
	"PanelRequest",
	"PanelService",
	"ViewportLike",
]
