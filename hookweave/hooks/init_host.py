from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from hookweave.hooks.base import HookBase, host_method_ref, index_in_range
from hookweave.modules.image import Instruction, MethodDef, ModuleImage
from hookweave.weaving.weaver import Weaver

if TYPE_CHECKING:
    from hookweave.patching.patcher import Patcher


class InitHostHook(HookBase):
    type: Literal["init_host"] = "init_host"
    injection_index: int = 0

    def prepare_patch(self, method: MethodDef, weaver: Weaver, base_module: ModuleImage, patcher: "Patcher") -> bool:
        if not index_in_range(self.injection_index, weaver):
            return False
        ref = host_method_ref(base_module, interface_type=patcher.settings.host_interface_type, method_name="Initialize")
        if ref is None:
            patcher.log("Base library does not expose {0}::Initialize", patcher.settings.host_interface_type)
            return False
        weaver.state["call"] = Instruction(opcode="call", operand=ref)
        return True

    def apply_patch(self, method: MethodDef, weaver: Weaver, base_module: ModuleImage, patcher: "Patcher") -> bool:
        call = weaver.state.get("call")
        if call is None:
            return False
        weaver.insert(self.injection_index, [call])
        return True
