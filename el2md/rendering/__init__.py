"""
Rendering: Markdown emission and output sinks.
"""
