from __future__ import annotations

import os

from hookweave.models import Project


def load_project(path: str) -> Project:
    with open(path, "r", encoding="utf-8") as f:
        return Project.model_validate_json(f.read())


def save_project(project: Project, path: str) -> None:
    """
    Persist the project, including hook `flagged` state set during a run, so the next
    run skips hooks that failed.
    """
    d = os.path.dirname(os.path.abspath(path))
    os.makedirs(d, exist_ok=True)
    tmp = path + ".tmp"
    with open(tmp, "w", encoding="utf-8") as f:
        f.write(project.model_dump_json(indent=2))
    os.replace(tmp, path)
