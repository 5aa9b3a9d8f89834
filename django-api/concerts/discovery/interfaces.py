"""Discovery registry interface.

A registry answers one question: which service names are registered right
now. Nothing is cached between calls.
"""

from abc import ABC, abstractmethod


class ServiceRegistry(ABC):
    """Interface for a service discovery directory."""

    @abstractmethod
    async def list_service_names(self) -> set[str]:
        """Return the names of the currently registered services.

        Raises:
            RegistryUnavailableError: If the directory cannot be queried.
        """
        ...
