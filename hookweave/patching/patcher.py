from __future__ import annotations

import os
import shutil
import sys
import traceback
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from hookweave.errors import MethodResolutionError, MissingModuleError
from hookweave.models import Hook, Manifest, Project
from hookweave.modules.image import ModuleImage
from hookweave.modules.io import read_module, write_module
from hookweave.patching.eligibility import SkipReason, resolve_eligibility
from hookweave.patching.resolver import resolve_method
from hookweave.settings import Settings
from hookweave.telemetry.patch_log import LogObserver, PatchLog
from hookweave.weaving.weaver import Weaver


class HookOutcome(str, Enum):
    applied = "applied"
    rejected = "rejected"  # prepare/apply returned False; hook gets flagged
    errored = "errored"  # prepare/apply raised; hook is left unflagged
    superseded = "superseded"
    skipped = "skipped"


@dataclass(frozen=True)
class HookResult:
    assembly_name: str
    hook_name: str
    outcome: HookOutcome


@dataclass
class PatchRun:
    results: List[HookResult] = field(default_factory=list)
    saved_modules: List[str] = field(default_factory=list)

    def outcomes(self, assembly_name: str | None = None) -> dict[str, HookOutcome]:
        return {r.hook_name: r.outcome for r in self.results if assembly_name in (None, r.assembly_name)}


class Patcher:
    """
    Weaves every manifest of a project into its target module.

    `console=True` is unattended mode: log lines go to stdout and a target module that
    has no pristine "_Original" copy yet is backed up first. Otherwise (interactive mode)
    the pristine copy must already exist and log lines go to `on_message` observers.
    """

    def __init__(
        self,
        project: Project,
        *,
        console: bool = False,
        settings: Optional[Settings] = None,
        log: Optional[PatchLog] = None,
    ):
        self.project = project
        self.console = console
        self.settings = settings or Settings()
        self._log = log or PatchLog(self.settings.log_path, console=console)

    def on_message(self, observer: LogObserver) -> None:
        self._log.on_message(observer)

    def log(self, fmt: str, *args: object) -> str:
        return self._log.log(fmt, *args)

    def get_module_filename(self, assembly_name: str, *, original: bool) -> str:
        src = self.project.configuration.assemblies_source_directory
        if original:
            stem, ext = os.path.splitext(assembly_name)
            return os.path.join(src, stem + self.settings.original_suffix + ext)
        return os.path.join(src, assembly_name)

    def base_library_path(self) -> str:
        d = self.settings.base_library_dir
        if not d:
            d = os.path.dirname(os.path.abspath(sys.argv[0] or "."))
        return os.path.join(d, self.settings.base_library_name)

    def load_base_library(self) -> ModuleImage:
        path = self.base_library_path()
        if not os.path.isfile(path):
            msg = f"Failed to locate base library module {path}"
            self._log.write(msg)
            raise MissingModuleError(msg)
        return read_module(path)

    def locate_target_module(self, manifest: Manifest) -> str:
        original = self.get_module_filename(manifest.assembly_name, original=True)
        if os.path.isfile(original):
            return original
        if self.console:
            plain = self.get_module_filename(manifest.assembly_name, original=False)
            if os.path.isfile(plain):
                shutil.copyfile(plain, original)
                return original
        msg = f"Failed to locate target module {manifest.assembly_name}"
        self._log.write(msg)
        raise MissingModuleError(msg)

    def patch(self) -> PatchRun:
        base_module = self.load_base_library()
        self._log.banner()

        run = PatchRun()
        for manifest in self.project.manifests:
            filename = self.locate_target_module(manifest)
            self.log("Loading module {0}", manifest.assembly_name)
            module = read_module(filename)

            for decision in resolve_eligibility(manifest):
                hook = decision.hook
                if decision.skip is SkipReason.superseded:
                    outcome = HookOutcome.superseded
                elif decision.skip is SkipReason.base_flagged:
                    self.log("Ignored hook {0} as its base hook {1} is flagged", hook.name, decision.base.name)
                    outcome = HookOutcome.skipped
                elif decision.skip is SkipReason.flagged:
                    self.log("Ignored hook {0} as it is flagged", hook.name)
                    outcome = HookOutcome.skipped
                else:
                    outcome = self.apply_hook(manifest, hook, module, base_module)
                run.results.append(HookResult(manifest.assembly_name, hook.name, outcome))

            self.log("Saving module {0}", manifest.assembly_name)
            out = self.get_module_filename(manifest.assembly_name, original=False)
            write_module(module, out)
            run.saved_modules.append(out)
        return run

    def apply_hook(self, manifest: Manifest, hook: Hook, module: ModuleImage, base_module: ModuleImage) -> HookOutcome:
        try:
            _, method = resolve_method(module, hook, module_name=manifest.assembly_name)
        except MethodResolutionError as e:
            self._log.write(str(e))
            raise

        weaver = Weaver(method.body, module=module)
        try:
            ok = hook.prepare_patch(method, weaver, base_module, self) and hook.apply_patch(
                method, weaver, base_module, self
            )
        except Exception:
            self.log("Failed to apply hook {0}", hook.name)
            self.log(traceback.format_exc().rstrip())
            return HookOutcome.errored

        if not ok:
            self.log("Failed to apply hook {0}", hook.name)
            self.log("The injection index specified for {0} is invalid!", hook.name)
            hook.flagged = True
            return HookOutcome.rejected

        weaver.apply(method.body)
        self.log("Applied hook {0} to {1}::{2}", hook.name, hook.type_name, hook.signature.name)
        return HookOutcome.applied
