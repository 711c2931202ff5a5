# ---------------------------------------------------------------------------
# File: __main__.py
# ---------------------------------------------------------------------------
# Description:
#	Demo entry point: python -m pyezview
#
# Notes:
#	- One viewport with a few sample measurements. Right-click a measurement
#	  point to open its context menu; any other click closes it.
#
# ---------------------------------------------------------------------------

from __future__ import annotations

from pyezview.app import ViewerApp
from pyezview.services.measurements import Measurement


SAMPLE_MEASUREMENTS: tuple[Measurement, ...] = (
	Measurement(uid="m1", tool_name="Length", points=((120.0, 140.0), (260.0, 190.0)), label="12.4 mm"),
	Measurement(uid="m2", tool_name="EllipticalROI", points=((360.0, 220.0), (420.0, 300.0))),
	Measurement(uid="m3", tool_name="ArrowAnnotate", points=((200.0, 330.0), (240.0, 370.0)), label="See here"),
)


def build_app(app: ViewerApp) -> None:
	app.add_viewport(name="viewport-1")
	for m in SAMPLE_MEASUREMENTS:
		app.viewer.measurements.add(m)


def main() -> None:
	app = ViewerApp(width=800, height=600, cfg={"log_level": "INFO", "telemetry_enabled": True, "telemetry_sink": "log"})
	build_app(app)
	app.run()


if __name__ == "__main__":
	main()
