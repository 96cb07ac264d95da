class Singleton:
    """
    Base class for the process-wide services and agents.

    Subclasses are constructed once and reused. Each subclass guards its own
    initialization with a private ``_<name>_initialized`` flag, since
    ``__init__`` still runs on every instantiation.
    """

    _instances = {}

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
        """Forget the cached instance so the next call builds a fresh one."""
        cls._instances.pop(cls, None)
