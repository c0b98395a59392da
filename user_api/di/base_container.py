# Standard library imports
from typing import Any, Callable, Dict, Hashable


class BaseContainer:
    """
    Minimal service registry.

    Keys are usually interface classes (UserRepository, use case classes) or
    plain strings for infrastructure handles ("user_collection").
    Singletons are returned as registered; factories build a fresh instance
    on every get().
    """

    def __init__(self) -> None:
        self._singletons: Dict[Hashable, Any] = {}
        self._factories: Dict[Hashable, Callable[[], Any]] = {}

    def register_singleton(self, key: Hashable, instance: Any) -> None:
        self._singletons[key] = instance

    def register_factory(self, key: Hashable, factory: Callable[[], Any]) -> None:
        self._factories[key] = factory

    def has(self, key: Hashable) -> bool:
        return key in self._singletons or key in self._factories

    def get(self, key: Hashable) -> Any:
        if key in self._singletons:
            return self._singletons[key]
        if key in self._factories:
            return self._factories[key]()
        raise KeyError(f"No registration for {key!r}")
