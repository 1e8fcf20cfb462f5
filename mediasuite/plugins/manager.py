from typing import List

from mediasuite.core import log_step
from mediasuite.media import MediaNode

from .decorators import DecoratorFactory


class PluginManager:
    """
    Ordered registry of decorator factories.

    apply_decorators() folds the factories left to right: the first registered
    factory produces the innermost wrapper, the last registered one the
    outermost (its effect fires last).
    """

    def __init__(self) -> None:
        self._factories: List[DecoratorFactory] = []

    def __len__(self) -> int:
        return len(self._factories)

    def register_decorator(self, factory: DecoratorFactory) -> DecoratorFactory:
        """Append a factory. The returned factory is the handle for unregistering."""
        self._factories.append(factory)
        return factory

    def unregister_decorator(self, factory: DecoratorFactory) -> bool:
        """Remove the first registration of exactly this factory object."""
        for index, registered in enumerate(self._factories):
            if registered is factory:
                del self._factories[index]
                return True
        return False

    def get_factories(self) -> List[DecoratorFactory]:
        return list(self._factories)

    def apply_decorators(self, base: MediaNode) -> MediaNode:
        current = base
        for factory in self._factories:
            current = factory(current)
        if self._factories:
            log_step(f"Decorated: {current.describe()}")
        return current

    def clear(self) -> None:
        self._factories.clear()
