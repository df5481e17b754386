from __future__ import annotations

from typing import Tuple

from hookweave.errors import MethodResolutionError
from hookweave.models import Hook
from hookweave.modules.image import MethodDef, ModuleImage, TypeDef
from hookweave.modules.signature import get_method_signature


def resolve_method(module: ModuleImage, hook: Hook, *, module_name: str) -> Tuple[TypeDef, MethodDef]:
    """
    Find the single method matching the hook's type name and signature across every
    sub-module. Zero or multiple matches (type or method) is fatal.
    """
    types = module.find_types(hook.type_name)
    methods = []
    if len(types) == 1:
        methods = [m for m in types[0].methods if get_method_signature(m) == hook.signature]
    if len(types) != 1 or len(methods) != 1:
        raise MethodResolutionError(
            f"Failed to locate method {hook.type_name}::{hook.signature.name} in module {module_name}",
            type_name=hook.type_name,
            signature_name=hook.signature.name,
            module_name=module_name,
        )
    return types[0], methods[0]
