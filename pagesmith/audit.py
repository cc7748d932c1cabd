import os
import shutil
import subprocess
from typing import TYPE_CHECKING

from . import console

if TYPE_CHECKING:
    from .project import Project

TIMEOUT = 120


def main(project: "Project", dist: str) -> bool:
    """
    Run pa11y against a written page. The outcome is reported only,
    it never changes whether the page counts as built.
    """
    settings = project.options().settings.get("pa11y") or {}
    executable = shutil.which(settings.get("command") or "pa11y")

    if executable is None:
        console.verbose(f"pa11y not found, skipping audit of {console.path(dist)}")
        return False

    command = [executable, *settings.get("args", []), f"file://{os.path.abspath(dist)}"]
    try:
        result = subprocess.run(command, capture_output=True, text=True, timeout=TIMEOUT)
    except (OSError, subprocess.SubprocessError) as e:
        console.error(f"pa11y failed: {e}", dist)
        return False

    if result.returncode != 0:
        console.warning(f"pa11y reported issues\n{result.stdout.strip()}", dist)
        return False

    console.verbose(f"{console.SUCCESS} pa11y passed {console.path(dist)}")
    return True
