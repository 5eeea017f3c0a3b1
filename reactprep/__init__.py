"""
ReactPrep - React interview question bank.

Annotated flawed/correct code pairs grouped by topic, with syntax
highlighting, line-anchored mistake overlays and local progress tracking.
"""

__version__ = "0.1.0"
