from __future__ import annotations

from hookweave.cli import main
from hookweave.hooks.simple import SimpleHook
from hookweave.modules.signature import MethodSignature
from hookweave.projects.store import load_project, save_project


def test_cli_patches_and_persists_flagged_hooks(workspace, make_project, monkeypatch, capsys) -> None:
    monkeypatch.setenv("HOOKWEAVE_BASE_LIBRARY_DIR", str(workspace.bin_dir))
    monkeypatch.setenv("HOOKWEAVE_LOG_PATH", str(workspace.log_path))
    project = make_project(
        [
            SimpleHook(name="OnUpdate", type_name="Game.Player", signature=MethodSignature(name="Update")),
            SimpleHook(name="Broken", type_name="Game.World", signature=MethodSignature(name="Tick"), injection_index=9),
        ]
    )
    path = workspace.root / "project.json"
    save_project(project, str(path))

    assert main([str(path), "--console"]) == 0

    out = capsys.readouterr().out
    assert "1/2 hook(s) applied across 1 module(s)" in out
    hooks = load_project(str(path)).manifests[0].hooks
    assert [h.flagged for h in hooks] == [False, True]

    # second run skips the flagged hook
    assert main([str(path), "--console"]) == 0
    assert "Ignored hook Broken as it is flagged" in capsys.readouterr().out


def test_cli_reports_fatal_errors(workspace, make_project, monkeypatch, capsys) -> None:
    monkeypatch.setenv("HOOKWEAVE_BASE_LIBRARY_DIR", str(workspace.root / "nowhere"))
    monkeypatch.setenv("HOOKWEAVE_LOG_PATH", str(workspace.log_path))
    path = workspace.root / "project.json"
    save_project(make_project([]), str(path))

    assert main([str(path)]) == 1
    assert "Failed to locate base library module" in capsys.readouterr().err
