import os
import re
import time
import traceback
from fnmatch import fnmatch
from typing import TYPE_CHECKING, Dict, Iterable, List

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from . import console, router

if TYPE_CHECKING:
    from .project import Project

WILDCARD = re.compile(r"[*?\[]")


def matches(path: str, globs: Iterable[str]) -> bool:
    # "**/" may also match no directory at all
    return any(fnmatch(path, g) or fnmatch(path, g.replace(f"**{os.sep}", "")) for g in globs)


def watch_roots(globs: Iterable[str]) -> List[str]:
    """The existing directories an observer has to cover for these globs"""
    roots: List[str] = []
    for g in globs:
        found = WILDCARD.search(g)
        root = os.path.dirname(g[:found.start()] if found else g)
        if root and os.path.isdir(root) and root not in roots:
            roots.append(root)
    return roots


class ChangeHandler(FileSystemEventHandler):
    """Hands each matching change to the router, one event at a time"""

    def __init__(self, project: "Project", views: List[str], debounce: float = 0.2):
        self.project = project
        self.views = views
        self.debounce = debounce
        self.last_triggered: Dict[str, float] = {}

    def should_rebuild(self, path: str) -> bool:
        if not matches(path, self.project.options().globs):
            return False

        current_time = time.time()
        if current_time - self.last_triggered.get(path, 0) < self.debounce:
            return False

        self.last_triggered[path] = current_time
        return True

    def on_any_event(self, event):
        if event.is_directory or event.event_type not in ("modified", "created", "moved"):
            return

        path = getattr(event, "dest_path", "") or event.src_path
        if isinstance(path, bytes):
            path = os.fsdecode(path)

        try:
            if self.should_rebuild(path):
                router.route(self.project, path, self.views)
        except Exception as e:
            console.error(f"Rebuild failed: {e}", path, traceback.format_exc())


def watch(project: "Project", views: List[str]) -> None:
    opts = project.options()
    handler = ChangeHandler(project, views, float(opts.settings["watch"]["debounce"]))

    observer = Observer()
    for root in watch_roots(opts.globs):
        observer.schedule(handler, root, recursive=True)
    observer.start()

    console.watching(f"Views watching {console.ext(', '.join(opts.globs))}")

    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        console.success("\nStopping file watcher...")
    finally:
        observer.stop()
        observer.join()
        console.success("Done!")
