"""Identity resolver — completes descriptor coordinates from the parent."""

from __future__ import annotations

from pominstall.core.errors import IncompleteIdentity
from pominstall.models.descriptor import Descriptor, ResolvedIdentity


def resolve(descriptor: Descriptor) -> ResolvedIdentity:
    """Return the full coordinates of ``descriptor``.

    ``groupId`` and ``version`` fall back to the parent reference when absent.
    ``artifactId`` and ``packaging`` are never inherited.  The descriptor
    itself is left untouched.

    Raises
    ------
    IncompleteIdentity
        If any coordinate is still empty after inheritance.
    """
    group_id = descriptor.group_id
    version = descriptor.version
    parent = descriptor.parent
    if parent is not None:
        if not group_id:
            group_id = parent.group_id
        if not version:
            version = parent.version

    fields = {
        "groupId": group_id,
        "artifactId": descriptor.artifact_id,
        "version": version,
        "packaging": descriptor.packaging,
    }
    missing = [name for name, value in fields.items() if not value]
    if missing:
        raise IncompleteIdentity(missing)

    return ResolvedIdentity(
        group_id=group_id,
        artifact_id=descriptor.artifact_id,
        version=version,
        packaging=descriptor.packaging,
    )
