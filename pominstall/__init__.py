"""pominstall: bulk-install pre-built artifacts into a local Maven repository.

Coordinates are read from the POM embedded in each archive under
``META-INF/maven/`` or from a sibling ``.pom`` file, completed from the
parent reference where needed, and installed without any manual
``groupId``/``artifactId``/``version`` input.
"""

__version__ = "0.1.0"
__description__ = (
    "Bulk installer for jar, zip and pom artifacts into a local Maven repository"
)

from pominstall.core.bulk_installer import BulkInstaller
from pominstall.core.installer import LocalRepositoryInstaller

__all__ = ["BulkInstaller", "LocalRepositoryInstaller", "__version__"]
