"""
Smart File Insights
===================

Heuristic insight engine for cloud file listings.

Features:
- Smart tag generation from file names and MIME types
- Importance scoring and semantic grouping of files
- Collection insights: duplicate names, sensitive files, access map
  and a suggested folder structure

The engine is pure: it performs no I/O and never reads the clock.
"""

__version__ = "0.1.0"
