"""
Inkwell Backend - Personal Note-Taking Service

REST backend for the Inkwell rich-text notebook: notes, folders, tags,
trash, version history, note locks, comments and writing statistics.

Version: 1.0.0
"""

__version__ = "1.0.0"
