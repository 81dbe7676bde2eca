from typing import Type

from polysquare.core.exceptions import EngineNotFoundError
from polysquare.models.schemas import CipherType
from polysquare.services.engines.base import CipherEngine


class EngineRegistry:
    """
    Registry for cipher engines.

    Engines register their class by cipher type; instances are created
    lazily and shared, which is safe because engines hold no state.
    """

    _engines: dict[CipherType, Type[CipherEngine]] = {}
    _instances: dict[CipherType, CipherEngine] = {}

    @classmethod
    def register(cls, engine_class: Type[CipherEngine]) -> Type[CipherEngine]:
        """
        Register a cipher engine class.

        Can be used as a decorator:
            @EngineRegistry.register
            class PlayfairEngine(CipherEngine):
                ...
        """
        cls._engines[engine_class.cipher_type] = engine_class
        return engine_class

    def get_engine(self, cipher_type: CipherType) -> CipherEngine | None:
        """
        Get an engine instance for the specified cipher type.

        Args:
            cipher_type: The type of cipher

        Returns:
            Engine instance or None if not found
        """
        if cipher_type not in self._engines:
            return None

        if cipher_type not in self._instances:
            self._instances[cipher_type] = self._engines[cipher_type]()

        return self._instances[cipher_type]

    def require_engine(self, cipher_type: CipherType) -> CipherEngine:
        """Like get_engine, but raises EngineNotFoundError when missing."""
        engine = self.get_engine(cipher_type)
        if engine is None:
            raise EngineNotFoundError(str(getattr(cipher_type, "value", cipher_type)))
        return engine

    def get_all_engines(self) -> list[CipherEngine]:
        """Get all registered engines."""
        return [self.require_engine(cipher_type) for cipher_type in self._engines]


# Import engines to trigger registration
def _load_engines() -> None:
    """Load all engine modules to trigger registration."""
    from polysquare.services.engines import polygraphic  # noqa: F401


# Load engines when module is imported
_load_engines()
