from abc import ABC, ABCMeta
from typing import Dict
import threading


class SingletonMeta(type):
    """
    Thread-safe Singleton metaclass.

    The first call to the class creates the instance under a lock, so
    concurrent first access from several threads still yields one object.
    Later calls return the stored instance and ignore their arguments.
    The lock is reentrant so a `_setup` may create other singletons.
    """

    _instances: Dict[type, object] = {}
    _lock: threading.RLock = threading.RLock()

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            with cls._lock:
                if cls not in cls._instances:
                    cls._instances[cls] = super().__call__(*args, **kwargs)
        return cls._instances[cls]

    def has_instance(cls) -> bool:
        """Check whether the class has already been instantiated."""
        return cls in cls._instances

    def clear_instance(cls) -> None:
        """
        Forget the stored instance so the next call builds a fresh one.
        Intended for tests only.
        """
        with cls._lock:
            cls._instances.pop(cls, None)


class SingletonABCMeta(SingletonMeta, ABCMeta):
    """
    Metaclass that combines Singleton and ABC metaclasses to avoid conflicts.
    """
    pass


class Singleton(ABC, metaclass=SingletonABCMeta):
    """
    Abstract base class for implementing Singleton pattern.

    Subclasses put their initialization in `_setup`, which runs exactly once
    for the lifetime of the instance (Uninitialized -> Initialized). There
    is no teardown state; the instance lives until the process exits.
    """

    def __init__(self):
        if getattr(self, '_initialized', False):
            return
        self._initialized = True
        self._setup()

    def _setup(self):
        """
        Override this method to perform actual initialization.
        This method will only be called once during the lifetime of the singleton.
        """
        pass

    @classmethod
    def get_instance(cls):
        """
        Get the singleton instance, creating it on first access.

        Returns:
            The singleton instance of the class.
        """
        return cls()
