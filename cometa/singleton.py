"""Per-class singletons and the manager interface built on them."""

from __future__ import annotations

from abc import ABC, abstractmethod

from cometa.assertion import warning


class Singleton:
    """Base class giving each subclass its own lazily created instance."""

    @classmethod
    def create(cls):
        """Create the instance, warning if one already exists."""
        if vars(cls).get("_instance") is None:
            cls._instance = cls()
        else:
            warning("Singleton tries to be created more than once")
        return cls._instance

    @classmethod
    def get_instance(cls):
        """Return the instance, creating it on first use."""
        instance = vars(cls).get("_instance")
        if instance is None:
            return cls.create()
        return instance

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the current instance so the next access creates a new one."""
        if "_instance" in vars(cls):
            cls._instance = None


class SingletonManager(Singleton, ABC):
    """A singleton with an init/update/close life cycle."""

    @abstractmethod
    def init(self) -> None:
        """Prepare the manager."""

    @abstractmethod
    def update(self) -> None:
        """Advance the manager by one frame."""

    @abstractmethod
    def close(self) -> None:
        """Release the manager's resources."""