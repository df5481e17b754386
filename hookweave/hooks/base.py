from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel

from hookweave.modules.image import MethodDef, ModuleImage
from hookweave.modules.signature import MethodSignature
from hookweave.weaving.weaver import Weaver

if TYPE_CHECKING:
    from hookweave.patching.patcher import Patcher


class HookBase(BaseModel, ABC):
    """
    A configured instrumentation point.

    Subclasses implement the two-phase contract used by the patcher:
    - prepare_patch: validate the injection point and stage anything needed in `weaver.state`
      (must not touch the weaver's instructions or the method body)
    - apply_patch: perform the edit against the weaver

    Both return False for an orderly rejection; the patcher then flags the hook.

    Never instantiated directly: project files only load the concrete variants of the
    `hookweave.models.Hook` union.
    """

    type: str
    name: str
    type_name: str
    signature: MethodSignature
    flagged: bool = False
    # Name of the hook (same manifest) this one is a clone of.
    base_hook_name: Optional[str] = None

    @abstractmethod
    def prepare_patch(self, method: MethodDef, weaver: Weaver, base_module: ModuleImage, patcher: "Patcher") -> bool:
        ...

    @abstractmethod
    def apply_patch(self, method: MethodDef, weaver: Weaver, base_module: ModuleImage, patcher: "Patcher") -> bool:
        ...

    def __str__(self) -> str:
        return self.name


def host_method_ref(base_module: ModuleImage, *, interface_type: str, method_name: str) -> str | None:
    """
    Return the call operand for a host entry point exposed by the base library, or None
    when the base library doesn't provide it.
    """
    types = base_module.find_types(interface_type)
    if len(types) != 1:
        return None
    if not any(m.name == method_name for m in types[0].methods):
        return None
    return f"{interface_type}::{method_name}"


def index_in_range(index: int, weaver: Weaver) -> bool:
    return 0 <= index <= len(weaver)
