from typing import Any, Dict


class Singleton:
    """
    Base class to implement singleton pattern.

    Subclasses are created once and reused across the application; the
    module-level service instances rely on this so configuration is read a
    single time at startup.
    """

    _instances: Dict[type, Any] = {}

    def __new__(cls, *args, **kwargs):
        if cls not in cls._instances:
            cls._instances[cls] = super(Singleton, cls).__new__(cls)
        return cls._instances[cls]

    def __init__(self, *args, **kwargs):
        if hasattr(self, "_initialized"):
            return
        self._initialized = True
        super().__init__()

    @classmethod
    def reset_instance(cls):
        """Forget the cached instance so the next call re-reads configuration."""
        cls._instances.pop(cls, None)
