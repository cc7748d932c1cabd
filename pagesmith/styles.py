import os
import shutil
import subprocess
from typing import TYPE_CHECKING, Any, Dict, List

from . import console
from .config import STYLES_FILE, fix_dir, load_yaml

if TYPE_CHECKING:
    from .project import Project


def load(project: "Project") -> Dict[str, Any]:
    return load_yaml(os.path.join(project.config_dir, STYLES_FILE))


def main(project: "Project", style: Dict[str, Any], config: Dict[str, Any]) -> bool:
    """Run the PostCSS plugins over one compiled Sass bundle, in place"""
    base = fix_dir(str(project.options().settings["base"]))
    bundle = os.path.join(base, style["outDir"], style["outFile"])

    if not os.path.exists(bundle):
        console.error(f"PostCSS bundle {console.path(bundle)} does not exist")
        return False

    executable = shutil.which(config.get("command") or "postcss")
    if executable is None:
        console.error("PostCSS failed: postcss executable not found")
        return False

    command = [executable, bundle, "--replace"]
    plugins = config.get("plugins") or []
    if plugins:
        command += ["--use", *plugins]

    try:
        subprocess.run(command, check=True, capture_output=True, text=True)
    except subprocess.CalledProcessError as e:
        console.error(f"PostCSS failed on {console.path(bundle)}", detail=e.stderr or "")
        return False
    except OSError as e:
        console.error(f"PostCSS failed: {e}", bundle)
        return False

    console.describe(f"{console.SUCCESS} PostCSS on {console.path(bundle)}")
    return True


def run(project: "Project") -> List[str]:
    """Post-process every configured bundle, one failure does not stop the rest"""
    config = load(project)
    done = []
    for style in config.get("bundles") or []:
        if main(project, style, config):
            done.append(os.path.join(style["outDir"], style["outFile"]))
    return done
