import copy
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List

import yaml

EXT = ".j2"
GLOBAL_FILE = "global.yml"
TEMPLATES_FILE = "templates.yml"
STYLES_FILE = "styles.yml"

GLOBAL_DEFAULTS: Dict[str, Any] = {
    "base": ".",
    "src": "src",
    "dist": "dist",
    "entry": {"views": "views"},
    "watch": {"debounce": 0.2},
    "pa11y": {"command": "pa11y", "args": []},
}


@dataclass(frozen=True)
class Options:
    config: Dict[str, Any]
    settings: Dict[str, Any]
    source: str
    dist: str
    base_path: str
    views: str
    ext: str = EXT
    globs: List[str] = field(default_factory=list)


def fix_dir(path: str) -> str:
    """Convert directory path to absolute path"""
    if not path:
        return os.getcwd()
    return os.path.abspath(os.path.expanduser(path))


def load_yaml(path: str) -> Dict[str, Any]:
    """Read a YAML mapping, an absent file reads as empty"""
    if not os.path.exists(path):
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping, not {type(data).__name__}")
    return data


def merge(defaults: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(defaults)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_global(config_dir: str) -> Dict[str, Any]:
    return merge(GLOBAL_DEFAULTS, load_yaml(os.path.join(config_dir, GLOBAL_FILE)))


def load_templates(config_dir: str) -> Dict[str, Any]:
    return load_yaml(os.path.join(config_dir, TEMPLATES_FILE))


def options(config_dir: str) -> Options:
    """
    Resolve the working paths from the configuration directory.
    Both files are read on every call so edits apply to a running watch session.
    """
    settings = load_global(config_dir)
    config = load_templates(config_dir)

    base = fix_dir(str(settings["base"]))
    source = os.path.join(base, settings["src"])
    base_path = source

    return Options(
        config=config,
        settings=settings,
        source=source,
        dist=os.path.join(base, settings["dist"]),
        base_path=base_path,
        views=os.path.join(base_path, settings["entry"]["views"]),
        ext=EXT,
        globs=config.get("globs") or [
            os.path.join(config_dir, TEMPLATES_FILE),
            os.path.join(source, "**", f"*{EXT}"),
            os.path.join(source, "**", "*.md"),
        ],
    )
