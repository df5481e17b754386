from __future__ import annotations

import os
from types import SimpleNamespace
from typing import Callable, List

import pytest

from hookweave.models import Manifest, Project, ProjectConfiguration
from hookweave.modules.image import Instruction, MethodBody, MethodDef, ModuleImage, ParameterDef, SubModule, TypeDef
from hookweave.modules.io import write_module
from hookweave.settings import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Keep tests deterministic and isolated from developer machine env.
    """
    for k in list(os.environ.keys()):
        if k.startswith("HOOKWEAVE_"):
            monkeypatch.delenv(k, raising=False)


def make_method(name: str, opcodes: List[str], params: tuple = ()) -> MethodDef:
    return MethodDef(
        name=name,
        parameters=[ParameterDef(name=f"arg{i}", type_name=t) for i, t in enumerate(params)],
        body=MethodBody(instructions=[Instruction(opcode=op) for op in opcodes]),
    )


def make_base_library() -> ModuleImage:
    return ModuleImage(
        name="Host.Core",
        modules=[
            SubModule(
                name="Host.Core.dll",
                types=[TypeDef(full_name="Host.Core.Interface", methods=[make_method("CallHook", ["ret"]), make_method("Initialize", ["ret"])])],
            )
        ],
    )


def make_target_module() -> ModuleImage:
    return ModuleImage(
        name="Game",
        references=["Host.Core"],
        modules=[
            SubModule(
                name="Game.dll",
                types=[
                    TypeDef(
                        full_name="Game.Player",
                        methods=[
                            make_method("Update", ["nop", "ldarg.0", "ret"]),
                            make_method("Spawn", ["ldarg.1", "ret"], params=("System.Int32",)),
                        ],
                    ),
                    TypeDef(full_name="Game.World", methods=[make_method("Tick", ["ret"])]),
                ],
            )
        ],
    )


@pytest.fixture
def workspace(tmp_path) -> SimpleNamespace:
    """
    bin/Host.Core.dll     base library
    managed/Game_Original.dll  pristine target module (interactive-mode input)
    """
    bin_dir = tmp_path / "bin"
    managed = tmp_path / "managed"
    bin_dir.mkdir()
    managed.mkdir()
    write_module(make_base_library(), str(bin_dir / "Host.Core.dll"))
    write_module(make_target_module(), str(managed / "Game_Original.dll"))

    settings = Settings(log_path=str(tmp_path / "log.txt"), base_library_dir=str(bin_dir))
    return SimpleNamespace(
        root=tmp_path,
        bin_dir=bin_dir,
        managed=managed,
        settings=settings,
        log_path=tmp_path / "log.txt",
    )


@pytest.fixture
def make_project(workspace) -> Callable[..., Project]:
    def _make(hooks: list, assembly_name: str = "Game.dll") -> Project:
        return Project(
            name="test",
            configuration=ProjectConfiguration(assemblies_source_directory=str(workspace.managed)),
            manifests=[Manifest(assembly_name=assembly_name, hooks=hooks)],
        )

    return _make
