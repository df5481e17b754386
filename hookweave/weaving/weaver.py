from __future__ import annotations

from typing import Any, Dict, Iterable, List, Tuple

from hookweave.modules.image import Instruction, MethodBody, ModuleImage


class Weaver:
    """
    Scratch copy of one method body. Hooks stage edits here; the patcher commits them with
    `apply` only after both hook phases succeed, so the live body is never half-edited.
    """

    def __init__(self, body: MethodBody, *, module: ModuleImage | None = None):
        self.module = module
        self.state: Dict[str, Any] = {}
        self._instructions: List[Instruction] = [i.model_copy(deep=True) for i in body.instructions]

    @property
    def instructions(self) -> Tuple[Instruction, ...]:
        return tuple(self._instructions)

    def __len__(self) -> int:
        return len(self._instructions)

    def insert(self, index: int, instructions: Iterable[Instruction]) -> None:
        if index < 0 or index > len(self._instructions):
            raise IndexError(f"insert index {index} out of range (0..{len(self._instructions)})")
        self._instructions[index:index] = [i.model_copy(deep=True) for i in instructions]

    def remove(self, index: int, count: int = 1) -> None:
        if count < 0 or index < 0 or index + count > len(self._instructions):
            raise IndexError(f"cannot remove {count} instruction(s) at {index} (body has {len(self._instructions)})")
        del self._instructions[index : index + count]

    def apply(self, body: MethodBody) -> None:
        body.instructions = [i.model_copy(deep=True) for i in self._instructions]
