from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from hookweave.hooks.init_host import InitHostHook
from hookweave.hooks.modify import ModifyHook
from hookweave.hooks.simple import SimpleHook
from hookweave.models import Project
from hookweave.projects.store import load_project, save_project

RAW = {
    "name": "rust",
    "configuration": {"assemblies_source_directory": "managed"},
    "manifests": [
        {
            "assembly_name": "Game.dll",
            "hooks": [
                {"type": "init_host", "name": "InitHost", "type_name": "Game.Boot", "signature": {"name": "Awake"}},
                {
                    "type": "simple",
                    "name": "OnUpdate",
                    "type_name": "Game.Player",
                    "signature": {"name": "Update", "exposure": "private"},
                    "injection_index": 3,
                },
                {
                    "type": "modify",
                    "name": "OnUpdate [late]",
                    "type_name": "Game.Player",
                    "signature": {"name": "Update", "exposure": "private"},
                    "base_hook_name": "OnUpdate",
                    "remove_count": 1,
                    "instructions": [{"opcode": "ldc.i4.1"}],
                },
            ],
        }
    ],
}


def test_load_dispatches_hook_types_and_save_persists_flags(tmp_path) -> None:
    path = tmp_path / "project.json"
    path.write_text(json.dumps(RAW), encoding="utf-8")

    project = load_project(str(path))
    hooks = project.manifests[0].hooks
    assert [type(h) for h in hooks] == [InitHostHook, SimpleHook, ModifyHook]
    assert project.manifests[0].base_of(hooks[2]) is hooks[1]
    assert project.manifests[0].base_of(hooks[1]) is None

    hooks[1].flagged = True
    save_project(project, str(path))

    again = load_project(str(path))
    assert again.manifests[0].hooks[1].flagged is True
    assert again.manifests[0].hooks[2].instructions[0].opcode == "ldc.i4.1"


def test_base_hook_must_live_in_same_manifest() -> None:
    raw = json.loads(json.dumps(RAW))
    raw["manifests"][0]["hooks"][2]["base_hook_name"] = "SomewhereElse"
    with pytest.raises(ValidationError):
        Project.model_validate(raw)


def test_hook_cannot_be_its_own_base() -> None:
    raw = json.loads(json.dumps(RAW))
    raw["manifests"][0]["hooks"][1]["base_hook_name"] = "OnUpdate"
    with pytest.raises(ValidationError):
        Project.model_validate(raw)
