from __future__ import annotations


class MissingModuleError(FileNotFoundError):
    """Raised when the base library or a manifest's target module cannot be found on disk."""


class MethodResolutionError(LookupError):
    """Raised when a hook's type or signature does not resolve to exactly one method."""

    def __init__(self, message: str, *, type_name: str, signature_name: str, module_name: str):
        super().__init__(message)
        self.type_name = type_name
        self.signature_name = signature_name
        self.module_name = module_name
