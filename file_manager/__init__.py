"""file_manager package: an interactive shell for everyday filesystem operations.

Subpackages follow a clean-architecture split (entities, ports, adapters,
use_cases); keep __all__ empty and import from the submodules directly.
"""

__all__: list[str] = []
