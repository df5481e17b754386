from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from hookweave.errors import MethodResolutionError, MissingModuleError
from hookweave.patching.patcher import HookOutcome, Patcher
from hookweave.projects.store import load_project, save_project
from hookweave.settings import Settings


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="hookweave", description="Weave a project's hooks into its target modules.")
    ap.add_argument("project", help="path to the project JSON file")
    ap.add_argument("--console", action="store_true", help="unattended mode: back up plain modules, log to stdout")
    args = ap.parse_args(argv)

    settings = Settings()
    project = load_project(args.project)
    patcher = Patcher(project, console=args.console, settings=settings)
    if not args.console:
        patcher.on_message(print)

    try:
        run = patcher.patch()
    except (MissingModuleError, MethodResolutionError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    finally:
        # Hooks flagged before an abort still need to be persisted.
        save_project(project, args.project)

    applied = sum(1 for r in run.results if r.outcome == HookOutcome.applied)
    print(f"{applied}/{len(run.results)} hook(s) applied across {len(run.saved_modules)} module(s)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
