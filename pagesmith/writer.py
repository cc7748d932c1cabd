import os
from typing import TYPE_CHECKING, Optional

from . import console
from .beautify import beautify
from .config import Options

if TYPE_CHECKING:
    from .project import Project


def is_within(path: str, root: str) -> bool:
    rel = os.path.relpath(path, root)
    return rel != os.pardir and not rel.startswith(os.pardir + os.sep)


def destination(opts: Options, source: str) -> str:
    """Map a view to its place in the distribution tree"""
    stem, extension = os.path.splitext(source)
    target = stem + ".html" if extension == opts.ext else source

    if is_within(target, opts.views):
        target = os.path.join(opts.dist, os.path.relpath(target, opts.views))

    return target


def write(project: "Project", source: str, data: Optional[str]) -> Optional[str]:
    """Write compiled html to the distribution folder, returns the written path"""
    if data is None:
        console.error("Nothing to write, compilation failed", source)
        return None

    dist = source
    try:
        opts = project.options()
        dist = destination(opts, source)

        os.makedirs(os.path.dirname(dist) or ".", exist_ok=True)

        if opts.config.get("beautify"):
            data = beautify(data, opts.config["beautify"])

        with open(dist, "w", encoding="utf-8") as f:
            f.write(data)

        console.describe(f"{console.SUCCESS} View in {console.path(source)} out {console.path(dist)}")
        return dist
    except OSError as e:
        console.error(f"Cannot write file {console.path(dist)}: {e}", source)
        return None
