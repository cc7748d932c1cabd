import os
from enum import Enum
from typing import TYPE_CHECKING, Iterable, List, NamedTuple, Optional

from . import console, walker
from .writer import is_within

if TYPE_CHECKING:
    from .project import Project


class Action(Enum):
    SINGLE = "single"
    INFERRED = "inferred"
    WALK = "walk"


class Route(NamedTuple):
    action: Action
    target: str


def stem(view: str, ext: str) -> str:
    name = os.path.basename(view)
    return name[:-len(ext)] if ext and name.endswith(ext) else name


def owner(changed: str, views: Iterable[str], views_dir: str, ext: str) -> Optional[str]:
    """The view whose partials live in the changed file's directory, if any"""
    parent = os.path.dirname(changed)
    if os.path.normpath(parent) == os.path.normpath(views_dir):
        return None

    name = os.path.basename(parent)
    for view in views:
        if stem(view, ext) == name:
            return view
    return None


def classify(changed: str, views: Iterable[str], views_dir: str, ext: str) -> Route:
    view = owner(changed, views, views_dir, ext)
    if view is not None:
        return Route(Action.INFERRED, os.path.join(views_dir, stem(view, ext) + ext))

    if is_within(changed, views_dir):
        return Route(Action.SINGLE, changed)

    return Route(Action.WALK, views_dir)


def route(project: "Project", changed: str, views: List[str]) -> List[str]:
    """Rebuild what a change to `changed` affects, returns the written paths"""
    opts = project.options()

    if not project.development:
        return walker.walk(project, opts.views)

    console.watching(f"Detected change on {console.path(changed)}")

    action, target = classify(changed, views, opts.views, opts.ext)
    console.verbose(f"  {action.value} {console.path(target)}")

    if action is Action.WALK:
        return walker.walk(project, target)

    dist = walker.main(project, target)
    return [dist] if dist else []
