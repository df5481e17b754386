from __future__ import annotations

import os

from hookweave.modules.image import ModuleImage


def read_module(path: str) -> ModuleImage:
    with open(path, "r", encoding="utf-8") as f:
        return ModuleImage.model_validate_json(f.read())


def write_module(module: ModuleImage, path: str) -> None:
    """
    Overwrite `path` with the serialized module. Written to a sibling temp file first
    so a crash mid-write never leaves a truncated module behind.
    """
    d = os.path.dirname(os.path.abspath(path))
    os.makedirs(d, exist_ok=True)
    tmp = path + ".tmp"
    with open(tmp, "w", encoding="utf-8") as f:
        f.write(module.model_dump_json(indent=2))
    os.replace(tmp, path)
