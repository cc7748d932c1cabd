from typing import Any, Dict, Optional

from . import include as includes
from .config import Options, fix_dir, options


class Project:
    """
    Everything a build needs to know between events: where the configuration
    lives and which modes are on. Configuration itself is read on demand.
    """

    def __init__(self, config_dir: str = "config", development: bool = False, audit: bool = True):
        self.config_dir = fix_dir(config_dir)
        self.development = development
        self.audit = audit
        self.including = 0

    def options(self) -> Options:
        return options(self.config_dir)

    def include(self, reference: str, locals: Optional[Dict[str, Any]] = None) -> str:
        return includes.resolve(self, reference, locals)
