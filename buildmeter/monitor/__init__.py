"""buildmeter monitor — log classification and terminal rendering.

Modules
-------
classifier
    ``classify_log_entry`` maps a log line to a ``LogClassification``
    using ordered severity tiers.
renderer
    ``TerminalRenderer`` writes progress bars, monitoring status, log
    streams, build metrics and critical alerts to a Rich ``Console``.
"""
