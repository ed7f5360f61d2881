"""Transaction boundary interface."""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Commits or discards the mutations made through the repositories.

    Repositories flush their statements but never commit; whoever
    orchestrates a request decides when its changes become durable.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Make pending mutations durable."""
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """Discard pending mutations."""
        pass
