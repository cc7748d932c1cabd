import os
import sys
from typing import TYPE_CHECKING, List

from . import console, walker, watch

if TYPE_CHECKING:
    from .project import Project


def view_set(views_dir: str, ext: str) -> List[str]:
    """Top-level views, the files directly inside the views directory"""
    return sorted(v for v in os.listdir(views_dir) if v.endswith(ext))


def run(project: "Project", watching: bool = False) -> List[str]:
    opts = project.options()
    views_dir = opts.views

    # Nothing to build is not a failure
    if not os.path.isdir(views_dir):
        console.watching(f"Views skipping. {console.path(views_dir)} directory does not exist.")
        sys.exit(0)

    views = view_set(views_dir, opts.ext)

    if watching:
        watch.watch(project, views)
        return []

    written = walker.walk(project, views_dir)
    console.success(f"Views finished, {len(written)} written to {opts.dist}")
    return written
