"""qtscaffold -- scaffold a boilerplate Qt widget application.

Generates headers, sources, an optional Designer form, a CMake or qmake
build descriptor and a run script from four choices: Qt version, build
system, UI-file flag and project name.
"""

__version__ = "1.0.0"

from qtscaffold.errors import (
    DirectoryExistsError,
    MaterializationError,
    ScaffoldError,
    ToolchainUnavailableError,
    UserAbort,
)

__all__ = [
    "__version__",
    "DirectoryExistsError",
    "MaterializationError",
    "ScaffoldError",
    "ToolchainUnavailableError",
    "UserAbort",
]
