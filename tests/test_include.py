import pytest

from pagesmith import compilers, include


@pytest.fixture
def seen(monkeypatch):
    """Record which path each dialect is asked to compile"""
    calls = []

    def recorder(name):
        def compile(project, path, locals=None):
            calls.append((name, path))
            return name
        return compile

    monkeypatch.setattr(compilers.DIALECTS["j2"], "compile", recorder("j2"))
    monkeypatch.setattr(compilers.DIALECTS["md"], "compile", recorder("md"))
    monkeypatch.setattr(compilers.RAW, "compile", recorder("raw"))
    return calls


def test_reference_without_extension_is_a_template(site, seen):
    assert include.resolve(site.project, "partials/hero") == "j2"
    assert seen == [("j2", str(site.src / "partials" / "hero.j2"))]


def test_explicit_extension_is_kept(site, seen):
    assert include.resolve(site.project, "docs/intro.md") == "md"
    assert seen == [("md", str(site.src / "docs" / "intro.md"))]


def test_leading_slash_stays_under_source(site, seen):
    include.resolve(site.project, "/partials/hero")

    assert seen == [("j2", str(site.src / "partials" / "hero.j2"))]


def test_unregistered_extension_passes_through_with_notice(site, seen, capsys):
    assert include.resolve(site.project, "partials/snippet.html") == "raw"
    assert "no handler exists for" in capsys.readouterr().out


def test_raw_content_is_returned_verbatim(site):
    site.add("partials/snippet.html", "<b>{% raw %}</b>")

    assert site.project.include("partials/snippet.html") == "<b>{% raw %}</b>"


def test_failed_fragment_includes_as_empty(site):
    site.add("partials/broken.j2", "{{ missing }}")

    assert site.project.include("partials/broken") == ""
