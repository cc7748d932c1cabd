import os
from typing import TYPE_CHECKING, List, Optional

from . import audit, console, writer
from .compilers import DIALECTS

if TYPE_CHECKING:
    from .project import Project


def main(project: "Project", path: str) -> Optional[str]:
    """Compile and write a single view"""
    opts = project.options()
    if not path.endswith(opts.ext):
        return None

    compiled = DIALECTS[opts.ext.lstrip(".")].compile(project, path)
    dist = writer.write(project, path, compiled)

    if dist and project.audit:
        audit.main(project, dist)

    return dist


def walk(project: "Project", entry: str, base: Optional[str] = None) -> List[str]:
    """
    Compile a view, or every view below a directory.
    Returns the paths written to the distribution tree.
    """
    opts = project.options()
    base = base or opts.views
    entry = entry if writer.is_within(entry, base) else os.path.join(base, entry)

    if entry.endswith(opts.ext):
        dist = main(project, entry)
        return [dist] if dist else []

    if os.path.isfile(entry):
        console.verbose(f"Skipping {console.path(entry)}")
        return []

    written: List[str] = []
    try:
        children = os.listdir(entry)
    except OSError as e:
        console.error(f"Cannot read directory {console.path(entry)}: {e}")
        return written

    for child in reversed(children):
        written.extend(walk(project, child, entry))

    return written
