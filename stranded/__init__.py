"""
Find git repositories with unsaved work: uncommitted changes, unpushed
commits, branches without an upstream, or no remote at all.
"""

__version__ = "0.1.0"
