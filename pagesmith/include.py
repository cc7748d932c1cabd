import os
from typing import TYPE_CHECKING, Any, Dict, Optional

from . import console
from .compilers import DIALECTS, RAW

if TYPE_CHECKING:
    from .project import Project


def resolve(project: "Project", reference: str, locals: Optional[Dict[str, Any]] = None) -> str:
    """
    Compile the file a template refers to and return its HTML.
    References without an extension are templates, all are relative to the source root.
    """
    opts = project.options()
    extension = os.path.splitext(reference)[1]

    if extension == "":
        extension = opts.ext
        reference = reference + extension

    path = os.path.join(opts.source, reference.lstrip("/"))

    dialect = DIALECTS.get(extension.lstrip("."))
    if dialect is None:
        dialect = RAW
        console.notify(f"{console.INFO} Include: no handler exists for {console.ext(extension)} files. Rendering as is.")

    project.including += 1
    try:
        return dialect.compile(project, path, locals) or ""
    finally:
        project.including -= 1
