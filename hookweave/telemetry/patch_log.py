from __future__ import annotations

import os
from datetime import datetime
from typing import Callable, List, Optional

LogObserver = Callable[[str], None]


class PatchLog:
    """
    Dual-sink patch log: every line is appended to `path` (opened and closed per line),
    and lines written through `log` are mirrored to stdout in console mode or to the
    registered observers otherwise.
    """

    def __init__(self, path: str, *, console: bool = False):
        self.path = path
        self.console = console
        self.observers: List[LogObserver] = []
        d = os.path.dirname(path)
        if d:
            os.makedirs(d, exist_ok=True)

    def on_message(self, observer: LogObserver) -> None:
        self.observers.append(observer)

    def write(self, line: str) -> None:
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(line + "\n")

    def log(self, fmt: str, *args: object) -> str:
        line = fmt.format(*args) if args else fmt
        self.write(line)
        if self.console:
            print(line)
        else:
            for observer in self.observers:
                observer(line)
        return line

    def banner(self, now: Optional[datetime] = None) -> None:
        now = now or datetime.now().astimezone()
        self.write("-" * 40)
        offset = now.strftime("%z")
        if offset:
            # +hh:mm, as existing log.txt readers expect
            offset = f"{offset[:3]}:{offset[3:5]}"
        self.write(f"{now.strftime('%m/%d/%Y %I:%M:%S %p')} {offset}".rstrip())
        self.write("-" * 40)
