from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, Optional, Set

from hookweave.models import Hook, Manifest


class SkipReason(str, Enum):
    # Unflagged base whose clone is in effect; skipped without a log line.
    superseded = "superseded"
    base_flagged = "base_flagged"
    flagged = "flagged"


@dataclass(frozen=True)
class HookDecision:
    hook: Hook
    skip: Optional[SkipReason] = None
    base: Optional[Hook] = None

    @property
    def attempt(self) -> bool:
        return self.skip is None


def resolve_eligibility(manifest: Manifest) -> Iterator[HookDecision]:
    """
    Decide, in manifest order, which hooks should be woven.

    A hook referenced as some other hook's base is inert while neither it nor its clone is
    flagged (the clone replaces it). A clone whose base is flagged is skipped, as is any
    flagged hook.

    Decisions are yielded lazily: flags are read when a hook is reached, so a hook flagged
    earlier in the same run (e.g. a rejected clone) changes the decisions that follow it.
    """
    base_ids = set()
    clone_of: Dict[int, Hook] = {}
    for hook in manifest.hooks:
        base = manifest.base_of(hook)
        if base is not None:
            base_ids.add(id(base))
            clone_of[id(base)] = hook  # last clone wins

    for hook in manifest.hooks:
        yield decide(manifest, hook, base_ids=base_ids, clone_of=clone_of)


def decide(manifest: Manifest, hook: Hook, *, base_ids: Set[int], clone_of: Dict[int, Hook]) -> HookDecision:
    clone = clone_of.get(id(hook))
    clone_flagged = clone.flagged if clone is not None else False
    base = manifest.base_of(hook)

    if id(hook) in base_ids and not hook.flagged and not clone_flagged:
        return HookDecision(hook=hook, skip=SkipReason.superseded, base=base)
    if base is not None and base.flagged:
        return HookDecision(hook=hook, skip=SkipReason.base_flagged, base=base)
    if hook.flagged:
        return HookDecision(hook=hook, skip=SkipReason.flagged, base=base)
    return HookDecision(hook=hook, base=base)
