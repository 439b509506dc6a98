"""buildmeter: ANSI progress bars, log classification and alert banners.

Renders build progress, monitoring status, classified log streams,
build metrics and critical alerts for terminal-driven build tooling.
Every renderer is stateless; data arrives as frozen Pydantic snapshots
or as JSON on the command line.
"""

__version__ = "0.3.0"
__description__ = "ANSI build progress, log classification and alert rendering"

from buildmeter.monitor.classifier import classify_log_entry
from buildmeter.monitor.renderer import TerminalRenderer
from buildmeter.cli.app import app as cli

__all__ = ["TerminalRenderer", "classify_log_entry", "cli", "__version__"]
