"""Tests for the Recents facade and category routing."""

from __future__ import annotations

import logging
import os

import pytest
import yaml
from pathlib import Path

from recents.categories import CATEGORIES, DEFAULT_MAX_LENGTHS, Category, UnknownCategoryError
from recents.config import LimitsConfig, PathConfig, RecentsConfig, StoreConfig
from recents.core import Recents
from recents.paths import PathRules
from recents.router import route_category


@pytest.fixture
def config(tmp_path: Path) -> RecentsConfig:
    return RecentsConfig(store=StoreConfig(path=tmp_path / "store" / "store.yml"))


@pytest.fixture
def recents(config: RecentsConfig) -> Recents:
    return Recents(config)


@pytest.fixture
def home(tmp_path: Path) -> Path:
    h = tmp_path / "home" / "u"
    h.mkdir(parents=True)
    for name in ["a.txt", "b.txt"]:
        (h / name).write_text(name)
    return h


def stored(recents: Recents) -> dict:
    return yaml.safe_load(recents.store.path.read_text())


class TestRouter:
    @pytest.fixture
    def rules(self) -> PathRules:
        return PathRules(PathConfig())

    def test_local_unchanged(self, rules: PathRules):
        assert route_category(Category.FILES, "/home/u/a.txt", rules) is Category.FILES

    @pytest.mark.parametrize(
        "local, remote",
        [
            (Category.FILES, Category.REMOTE_FILES),
            (Category.DIRECTORIES, Category.REMOTE_DIRECTORIES),
            (Category.PROJECTS, Category.REMOTE_PROJECTS),
            (Category.REMOTE_FILES, Category.REMOTE_FILES),
        ],
    )
    def test_remote_remapped(self, rules: PathRules, local: Category, remote: Category):
        assert route_category(local, "/ssh:host:/srv/x", rules) is remote


class TestPushGet:
    def test_recency_and_dedup(self, recents: Recents, home: Path):
        a, b = str(home / "a.txt"), str(home / "b.txt")
        recents.push("files", a)
        recents.push("files", b)
        recents.push("files", a)
        assert recents.get("files") == [a, b]

    def test_push_returns_category(self, recents: Recents, home: Path):
        assert recents.push(Category.FILES, str(home / "a.txt")) is Category.FILES

    def test_capacity(self, tmp_path: Path, home: Path):
        config = RecentsConfig(
            limits=LimitsConfig(max_lengths={**DEFAULT_MAX_LENGTHS, Category.DIRECTORIES: 2}),
            store=StoreConfig(path=tmp_path / "store.yml"),
        )
        recents = Recents(config)
        dirs = []
        for name in ["d1", "d2", "d3"]:
            (home / name).mkdir()
            dirs.append(str(home / name) + os.sep)
            recents.push("directories", str(home / name))
        assert recents.get("directories") == [dirs[2], dirs[1]]

    def test_partial_limits_keep_defaults(self, tmp_path: Path, home: Path):
        limits = LimitsConfig(max_lengths={Category.FILES: 2})
        assert limits[Category.DIRECTORIES] == DEFAULT_MAX_LENGTHS[Category.DIRECTORIES]
        recents = Recents(RecentsConfig(limits=limits, store=StoreConfig(path=tmp_path / "s.yml")))
        assert recents.push("directories", str(home)) is Category.DIRECTORIES
        assert recents.get("directories") == [str(home) + os.sep]

    def test_zero_limit_records_nothing(self, tmp_path: Path, home: Path):
        limits = LimitsConfig(max_lengths={Category.FILES: 0})
        recents = Recents(RecentsConfig(limits=limits, store=StoreConfig(path=tmp_path / "s.yml")))
        assert recents.push("files", str(home / "a.txt")) is None
        assert recents.get("files") == []

    def test_ignored_leaves_store_unchanged(self, recents: Recents, home: Path):
        recents.push("files", str(home / "a.txt"))
        before = recents.store.path.read_bytes()
        (home / "a.txt~").write_text("backup")
        assert recents.push("files", str(home / "a.txt~")) is None
        assert recents.store.path.read_bytes() == before
        assert recents.get("files") == [str(home / "a.txt")]

    def test_remote_lands_in_remote_category(self, recents: Recents):
        assert recents.push("files", "/ssh:host:/etc/hosts") is Category.REMOTE_FILES
        assert recents.get("files") == []
        assert recents.get("remote-files") == ["/ssh:host:/etc/hosts"]

    def test_get_persists_pruning(self, recents: Recents, home: Path):
        a, b = str(home / "a.txt"), str(home / "b.txt")
        recents.push("files", a)
        recents.push("files", b)
        os.remove(b)
        assert stored(recents)["files"] == [b, a]
        assert recents.get("files") == [a]
        assert stored(recents)["files"] == [a]

    def test_store_deleted_externally(self, recents: Recents, home: Path):
        recents.push("files", str(home / "a.txt"))
        recents.store.path.unlink()
        assert recents.get("files") == []
        assert stored(recents) == {c.value: [] for c in CATEGORIES}

    def test_store_shared_between_instances(self, config: RecentsConfig, home: Path):
        first, second = Recents(config), Recents(config)
        first.push("files", str(home / "a.txt"))
        second.push("files", str(home / "b.txt"))
        assert first.get("files") == [str(home / "b.txt"), str(home / "a.txt")]

    def test_external_edit_is_picked_up(self, recents: Recents, home: Path):
        recents.push("files", str(home / "a.txt"))
        recents.store.path.write_text(f"files:\n- {home / 'b.txt'}\n")
        assert recents.get("files") == [str(home / "b.txt")]


class TestClearRemovePrune:
    def test_clear(self, recents: Recents, home: Path):
        recents.push("files", str(home / "a.txt"))
        recents.push("directories", str(home))
        assert recents.clear("files")
        assert recents.get("files") == []
        assert recents.get("directories") == [str(home) + os.sep]

    def test_remove(self, recents: Recents, home: Path):
        recents.push("files", str(home / "a.txt"))
        recents.push("files", str(home / "b.txt"))
        assert recents.remove("files", str(home / "a.txt"))
        assert not recents.remove("files", str(home / "a.txt"))
        assert recents.get("files") == [str(home / "b.txt")]

    def test_prune(self, recents: Recents, home: Path):
        recents.push("files", str(home / "a.txt"))
        recents.push("files", str(home / "b.txt"))
        recents.push("projects", "/ssh:h:/srv/repo/")
        os.remove(home / "a.txt")
        assert recents.prune() == 1
        assert stored(recents)["files"] == [str(home / "b.txt")]
        assert stored(recents)["remote-projects"] == ["/ssh:h:/srv/repo/"]

    def test_snapshot(self, recents: Recents, home: Path):
        recents.push("files", str(home / "a.txt"))
        snap = recents.snapshot()
        assert list(snap) == list(CATEGORIES)
        assert snap[Category.FILES] == [str(home / "a.txt")]


class TestErrors:
    def test_unknown_category(self, recents: Recents, home: Path):
        with pytest.raises(UnknownCategoryError):
            recents.push("bookmarks", str(home / "a.txt"))
        with pytest.raises(UnknownCategoryError):
            recents.get("recent")
        with pytest.raises(ValueError):
            recents.clear("")

    def test_store_path_is_directory(self, tmp_path: Path, home: Path, caplog):
        recents = Recents(RecentsConfig(store=StoreConfig(path=tmp_path)))
        with caplog.at_level(logging.WARNING):
            assert recents.push("files", str(home / "a.txt")) is None
            assert recents.get("files") == []
            assert recents.clear("files") is False
            assert recents.prune() == 0
        assert "is a directory" in caplog.text


class TestClassification:
    def test_is_remote(self, recents: Recents):
        assert recents.is_remote("/ssh:host:/x")
        assert not recents.is_remote("/home/u/x")

    def test_find_vc_root(self, recents: Recents, tmp_path: Path):
        repo = tmp_path / "repo"
        (repo / ".git").mkdir(parents=True)
        (repo / "src").mkdir()
        assert recents.find_vc_root(str(repo / "src" / "main.py")) == str(repo) + os.sep
