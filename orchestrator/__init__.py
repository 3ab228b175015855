"""
The Orchestrator - rule-based workspace organizer.

Classifies directory trees into the Inbox/Build/Studio/Library/Private/
Stage/Archives taxonomy and moves files accordingly.
"""

from .version import __version__

__all__ = ["__version__"]
