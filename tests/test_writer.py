import os

from pagesmith.config import Options
from pagesmith.writer import destination, is_within, write


def test_views_map_into_dist():
    opts = Options(config={}, settings={}, source="src", dist="dist", base_path="src", views="views")

    assert destination(opts, os.path.join("views", "a", "b.j2")) == os.path.join("dist", "a", "b.html")


def test_destination_absolute(site):
    opts = site.project.options()

    assert destination(opts, str(site.views / "home.j2")) == str(site.dist / "home.html")


def test_is_within():
    assert is_within(os.path.join("views", "a.j2"), "views")
    assert not is_within("layout.j2", "views")
    assert not is_within(os.path.join("views-old", "a.j2"), "views")


def test_write_creates_nested_directories(site):
    source = str(site.views / "a" / "b" / "c.j2")

    dist = write(site.project, source, "<p>c</p>")

    assert dist == str(site.dist / "a" / "b" / "c.html")
    assert site.output("a/b/c.html") == "<p>c</p>"


def test_write_is_repeatable(site):
    source = str(site.views / "a.j2")

    write(site.project, source, "<p>a</p>")
    write(site.project, source, "<p>a</p>")

    assert site.output("a.html") == "<p>a</p>"


def test_failed_compile_is_not_written(site, capsys):
    assert write(site.project, str(site.views / "a.j2"), None) is None
    assert not (site.dist / "a.html").exists()
    assert "Nothing to write" in capsys.readouterr().out


def test_write_failure_returns_none(site, capsys):
    site.dist.mkdir()
    # A directory where the file should go
    (site.dist / "a.html").mkdir()

    assert write(site.project, str(site.views / "a.j2"), "<p>a</p>") is None
    assert "Cannot write file" in capsys.readouterr().out
