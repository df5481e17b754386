from __future__ import annotations

from typing import TYPE_CHECKING, Literal, Optional

from hookweave.hooks.base import HookBase, host_method_ref, index_in_range
from hookweave.modules.image import Instruction, MethodDef, ModuleImage
from hookweave.weaving.weaver import Weaver

if TYPE_CHECKING:
    from hookweave.patching.patcher import Patcher


class SimpleHook(HookBase):
    """Injects `CallHook("<hook_name>")` into the method at `injection_index`."""

    type: Literal["simple"] = "simple"
    injection_index: int = 0
    # Name the host dispatches on; defaults to the hook's display name.
    hook_name: Optional[str] = None

    def prepare_patch(self, method: MethodDef, weaver: Weaver, base_module: ModuleImage, patcher: "Patcher") -> bool:
        if not index_in_range(self.injection_index, weaver):
            return False
        ref = host_method_ref(base_module, interface_type=patcher.settings.host_interface_type, method_name="CallHook")
        if ref is None:
            patcher.log("Base library does not expose {0}::CallHook", patcher.settings.host_interface_type)
            return False
        weaver.state["block"] = [
            Instruction(opcode="ldstr", operand=self.hook_name or self.name),
            Instruction(opcode="call", operand=ref),
            Instruction(opcode="pop"),
        ]
        return True

    def apply_patch(self, method: MethodDef, weaver: Weaver, base_module: ModuleImage, patcher: "Patcher") -> bool:
        block = weaver.state.get("block")
        if not block:
            return False
        weaver.insert(self.injection_index, block)
        return True
