from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict

from hookweave.modules.image import Exposure, MethodDef


class MethodSignature(BaseModel):
    """
    Identity of a method inside its declaring type. Two signatures are equal when every
    field matches, which is what the method resolver relies on.
    """

    model_config = ConfigDict(frozen=True)

    exposure: Exposure = Exposure.public
    name: str
    return_type: str = "System.Void"
    parameters: Tuple[str, ...] = ()

    def __str__(self) -> str:
        return f"{self.exposure.value} {self.return_type} {self.name}({', '.join(self.parameters)})"


def get_method_signature(method: MethodDef) -> MethodSignature:
    return MethodSignature(
        exposure=method.exposure,
        name=method.name,
        return_type=method.return_type,
        parameters=tuple(p.type_name for p in method.parameters),
    )
