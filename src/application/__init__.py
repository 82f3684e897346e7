"""
Application layer - Application Business Rules.

This layer contains application-specific business rules, including:
- Interfaces (ports) for infrastructure dependencies
- Application services that orchestrate domain logic
"""

from src.application.interfaces import (ICryptographicProvider, IErrorHandler,
                                        IHashService, IInputValidator)
from src.application.services import (HashService, PipelineStage,
                                      SecureErrorHandler,
                                      SecurityInputValidator)

__all__ = [
    # Interfaces
    "ICryptographicProvider",
    "IInputValidator",
    "IHashService",
    "IErrorHandler",
    # Services
    "HashService",
    "PipelineStage",
    "SecurityInputValidator",
    "SecureErrorHandler",
]
