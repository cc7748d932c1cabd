import pytest
import yaml

from pagesmith.project import Project


class Site:
    """A throwaway project tree: config/, src/views/, dist/"""

    def __init__(self, root):
        self.root = root
        self.config = root / "config"
        self.src = root / "src"
        self.views = self.src / "views"
        self.dist = root / "dist"

        self.config.mkdir()
        self.views.mkdir(parents=True)
        self.configure("global.yml", {"base": str(root)})
        self.project = Project(str(self.config), audit=False)

    def configure(self, name, data):
        (self.config / name).write_text(yaml.safe_dump(data), encoding="utf-8")

    def add(self, rel, text):
        path = self.src / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return str(path)

    def view(self, rel, text):
        return self.add(f"views/{rel}", text)

    def output(self, rel):
        return (self.dist / rel).read_text(encoding="utf-8")


@pytest.fixture
def site(tmp_path):
    return Site(tmp_path)
