import os

import pytest
from watchdog.events import DirModifiedEvent, FileDeletedEvent, FileModifiedEvent

from pagesmith import router
from pagesmith.watch import ChangeHandler, matches, watch_roots


def test_globs_match_at_any_depth():
    globs = [os.path.join("src", "**", "*.j2")]

    assert matches(os.path.join("src", "home.j2"), globs)
    assert matches(os.path.join("src", "views", "home", "hero.j2"), globs)
    assert not matches(os.path.join("src", "style.css"), globs)


def test_watch_roots_are_existing_directories(site):
    globs = site.project.options().globs

    assert watch_roots(globs) == [str(site.config), str(site.src)]


@pytest.fixture
def routed(monkeypatch):
    calls = []
    monkeypatch.setattr(router, "route", lambda project, changed, views: calls.append((changed, views)))
    return calls


def test_matching_change_is_routed(site, routed):
    handler = ChangeHandler(site.project, ["home.j2"], debounce=0)
    path = str(site.views / "home.j2")

    handler.on_any_event(FileModifiedEvent(path))

    assert routed == [(path, ["home.j2"])]


def test_config_change_is_routed(site, routed):
    handler = ChangeHandler(site.project, [], debounce=0)
    path = str(site.config / "templates.yml")

    handler.on_any_event(FileModifiedEvent(path))

    assert routed == [(path, [])]


def test_unrelated_and_directory_events_are_ignored(site, routed):
    handler = ChangeHandler(site.project, [], debounce=0)

    handler.on_any_event(FileModifiedEvent(str(site.src / "style.css")))
    handler.on_any_event(DirModifiedEvent(str(site.views)))
    handler.on_any_event(FileDeletedEvent(str(site.views / "home.j2")))

    assert routed == []


def test_repeated_events_are_debounced(site, routed):
    handler = ChangeHandler(site.project, [], debounce=60)
    home = str(site.views / "home.j2")
    about = str(site.views / "about.j2")

    handler.on_any_event(FileModifiedEvent(home))
    handler.on_any_event(FileModifiedEvent(home))
    handler.on_any_event(FileModifiedEvent(about))

    assert [changed for changed, _ in routed] == [home, about]


def test_broken_config_is_reported_and_watching_continues(site, routed, capsys):
    handler = ChangeHandler(site.project, [], debounce=0)
    config = str(site.config / "templates.yml")
    (site.config / "templates.yml").write_text("title: [unclosed\n", encoding="utf-8")

    handler.on_any_event(FileModifiedEvent(config))

    assert routed == []
    assert "Rebuild failed" in capsys.readouterr().out

    site.configure("templates.yml", {"title": "Fixed"})
    handler.on_any_event(FileModifiedEvent(config))

    assert routed == [(config, [])]
