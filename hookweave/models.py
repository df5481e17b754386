from __future__ import annotations

from typing import Annotated, List, Optional, Union

from pydantic import BaseModel, Field, model_validator

from hookweave.hooks.init_host import InitHostHook
from hookweave.hooks.modify import ModifyHook
from hookweave.hooks.simple import SimpleHook

Hook = Annotated[Union[SimpleHook, ModifyHook, InitHostHook], Field(discriminator="type")]


class ProjectConfiguration(BaseModel):
    assemblies_source_directory: str


class Manifest(BaseModel):
    """
    Hooks targeting one module. Clone -> base links are stored by hook name and
    resolved on lookup; a base must be another hook of this same manifest.
    """

    assembly_name: str
    hooks: List[Hook] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_base_hooks(self) -> "Manifest":
        for hook in self.hooks:
            if hook.base_hook_name is None:
                continue
            matches = [h for h in self.hooks if h.name == hook.base_hook_name and h is not hook]
            if len(matches) != 1:
                raise ValueError(
                    f"hook {hook.name!r} in {self.assembly_name}: base hook {hook.base_hook_name!r} "
                    f"must name exactly one other hook in the same manifest (found {len(matches)})"
                )
        return self

    def base_of(self, hook: Hook) -> Optional[Hook]:
        if hook.base_hook_name is None:
            return None
        for h in self.hooks:
            if h.name == hook.base_hook_name and h is not hook:
                return h
        return None


class Project(BaseModel):
    name: str = ""
    configuration: ProjectConfiguration
    manifests: List[Manifest] = Field(default_factory=list)
