from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="HOOKWEAVE_", extra="ignore")

    # Append-only patch log, relative to the working directory unless absolute.
    log_path: str = "log.txt"

    # Base library module providing the host entry points hooks call into.
    base_library_name: str = "Host.Core.dll"
    # If not set, the directory of the running program is used.
    base_library_dir: str | None = None

    # Pristine copies are stored as <stem><original_suffix><ext> next to the target module.
    original_suffix: str = "_Original"

    host_interface_type: str = "Host.Core.Interface"
