from __future__ import annotations

from typing import TYPE_CHECKING, List, Literal

from pydantic import Field

from hookweave.hooks.base import HookBase
from hookweave.modules.image import Instruction, MethodDef, ModuleImage
from hookweave.weaving.weaver import Weaver

if TYPE_CHECKING:
    from hookweave.patching.patcher import Patcher


class ModifyHook(HookBase):
    """
    Raw body edit: drop `remove_count` instructions at `injection_index`, then insert
    `instructions` in their place.
    """

    type: Literal["modify"] = "modify"
    injection_index: int = 0
    remove_count: int = 0
    instructions: List[Instruction] = Field(default_factory=list)

    def prepare_patch(self, method: MethodDef, weaver: Weaver, base_module: ModuleImage, patcher: "Patcher") -> bool:
        if self.injection_index < 0 or self.remove_count < 0:
            return False
        return self.injection_index + self.remove_count <= len(weaver)

    def apply_patch(self, method: MethodDef, weaver: Weaver, base_module: ModuleImage, patcher: "Patcher") -> bool:
        if self.remove_count:
            weaver.remove(self.injection_index, self.remove_count)
        weaver.insert(self.injection_index, self.instructions)
        return True
