"""
Formatting Package - Text Rendering of Metric State.

    - format_graphite: write "metric_name value" lines to a byte sink
    - render_lines: the same lines as a list
"""

from mysql_userstat.formatting.graphite import format_graphite, render_lines

__all__ = ["format_graphite", "render_lines"]
