"""Family name -> repository lookup.

Handlers receive one RepositoryRegistry instead of one constructor argument
per family. The container fills it with a repository for every registered
family.
"""

from collections.abc import Iterator, Mapping
from typing import cast

from crm_core.domain.protocols.repository import (
    EntityRepository,
    ReferenceRepository,
)


class RepositoryRegistry:
    """Read-only mapping of family name to repository."""

    def __init__(self, repositories: Mapping[str, EntityRepository]) -> None:
        self._repositories = dict(repositories)

    def __contains__(self, family: object) -> bool:
        return family in self._repositories

    def __iter__(self) -> Iterator[str]:
        return iter(self._repositories)

    def __len__(self) -> int:
        return len(self._repositories)

    def get(self, family: str) -> EntityRepository:
        """Repository serving ``family``.

        Raises:
            KeyError: If no repository is registered for the family.
        """
        try:
            return self._repositories[family]
        except KeyError:
            raise KeyError(f"No repository registered for family: {family}") from None

    def reference(self, family: str) -> ReferenceRepository:
        """Repository serving reference family ``family``.

        Raises:
            KeyError: If no repository is registered for the family.
        """
        return cast(ReferenceRepository, self.get(family))
