from __future__ import annotations

from enum import Enum
from typing import Any, Iterator, List

from pydantic import BaseModel, Field


class Exposure(str, Enum):
    public = "public"
    protected = "protected"
    internal = "internal"
    private = "private"


class Instruction(BaseModel):
    opcode: str
    operand: Any = None


class MethodBody(BaseModel):
    instructions: List[Instruction] = Field(default_factory=list)


class ParameterDef(BaseModel):
    name: str
    type_name: str


class MethodDef(BaseModel):
    name: str
    return_type: str = "System.Void"
    parameters: List[ParameterDef] = Field(default_factory=list)
    exposure: Exposure = Exposure.public
    body: MethodBody = Field(default_factory=MethodBody)


class TypeDef(BaseModel):
    full_name: str
    methods: List[MethodDef] = Field(default_factory=list)


class SubModule(BaseModel):
    name: str
    types: List[TypeDef] = Field(default_factory=list)


class ModuleImage(BaseModel):
    """
    In-memory view of a loaded module: sub-modules -> types -> methods -> body.
    Method bodies are mutated in place while patching; the image is then written back out.
    """

    name: str
    references: List[str] = Field(default_factory=list)
    modules: List[SubModule] = Field(default_factory=list)

    def iter_types(self) -> Iterator[TypeDef]:
        for sub in self.modules:
            yield from sub.types

    def find_types(self, full_name: str) -> List[TypeDef]:
        return [t for t in self.iter_types() if t.full_name == full_name]
