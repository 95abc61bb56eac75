from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BindingConfig:
    """Where and what the function-type registrar publishes."""

    parent_module: str = "gradfn._C"
    namespace_attr: str = "_functions"
    registry_attr: str = "_function_types"
    include_generated: bool = True

    @property
    def namespace_name(self) -> str:
        return f"{self.parent_module}.{self.namespace_attr}"


DEFAULT_CONFIG = BindingConfig()
