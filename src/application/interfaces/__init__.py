"""Application interfaces (ports)."""

from src.application.interfaces.services import (ICryptographicProvider,
                                                 IErrorHandler, IHashService,
                                                 IInputValidator)

__all__ = [
    "ICryptographicProvider",
    "IInputValidator",
    "IHashService",
    "IErrorHandler",
]
