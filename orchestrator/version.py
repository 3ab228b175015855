"""
Release number of the package.

Development checkouts also report the commit they were run from, so a bug
report from a source tree can be traced back to an exact revision.
"""

import subprocess
from pathlib import Path
from typing import Optional

__version__ = "3.0.0"

PACKAGE_DIR = Path(__file__).resolve().parent
GIT_TIMEOUT_SECONDS = 2


def get_git_hash(short_length: int = 7) -> Optional[str]:
    """
    Abbreviated commit of the checkout this package was loaded from.

    An installed wheel has no repository around it. That case, a missing
    ``git`` binary and a slow or failing ``git`` all give None.
    """
    command = ["git", "rev-parse", f"--short={short_length}", "HEAD"]
    try:
        completed = subprocess.run(
            command,
            cwd=PACKAGE_DIR,
            capture_output=True,
            text=True,
            timeout=GIT_TIMEOUT_SECONDS,
            check=True,
        )
    except (OSError, subprocess.SubprocessError):
        return None
    return completed.stdout.strip() or None


def get_version_string() -> str:
    """Version shown in the web launcher banner."""
    git_hash = get_git_hash()
    return f"{__version__} (git:{git_hash})" if git_hash else __version__
