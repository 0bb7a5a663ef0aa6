"""Tests for the per-operation workspace prologue."""

from __future__ import annotations

import json
from pathlib import Path

from agelum.config.settings import AgelumSettings
from agelum.infrastructure.workspace import Workspace


def _write_config(path: Path, root: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps({"rootGitDirectory": str(root)}))


class TestWorkspace:
    def test_prepare_provisions_taxonomy(self, workspace: Workspace, repo_root: Path) -> None:
        base = workspace.prepare()
        assert base == repo_root.resolve() / "agelum"
        assert (base / "tasks" / "doing").is_dir()

    def test_prepare_without_root(self, tmp_path: Path) -> None:
        start = tmp_path / "nowhere"
        start.mkdir()
        ws = Workspace(AgelumSettings(start_dir=start, max_depth=1))
        assert ws.prepare() is None

    def test_explicit_root_hint(self, tmp_path: Path) -> None:
        hint = tmp_path / "hint"
        hint.mkdir()
        ws = Workspace(AgelumSettings(start_dir=tmp_path, max_depth=1, root_hint=hint))
        assert ws.resolve_root() == hint.resolve()

    def test_root_hint_from_config_file(self, tmp_path: Path) -> None:
        hint = tmp_path / "hint"
        hint.mkdir()
        config = tmp_path / "cfg.json"
        _write_config(config, hint)
        ws = Workspace(AgelumSettings(start_dir=tmp_path, max_depth=1, config_path=config))
        assert ws.root_hint() == hint

    def test_config_file_reread_each_call(self, tmp_path: Path) -> None:
        first = tmp_path / "first"
        second = tmp_path / "second"
        first.mkdir()
        second.mkdir()
        config = tmp_path / "cfg.json"
        ws = Workspace(AgelumSettings(start_dir=tmp_path, max_depth=1, config_path=config))

        _write_config(config, first)
        assert ws.resolve_root() == first.resolve()
        _write_config(config, second)
        assert ws.resolve_root() == second.resolve()

    def test_setting_beats_config_file(self, tmp_path: Path) -> None:
        from_setting = tmp_path / "setting"
        from_file = tmp_path / "file"
        from_setting.mkdir()
        from_file.mkdir()
        config = tmp_path / "cfg.json"
        _write_config(config, from_file)
        ws = Workspace(
            AgelumSettings(
                start_dir=tmp_path, max_depth=1, config_path=config, root_hint=from_setting
            )
        )
        assert ws.root_hint() == from_setting
