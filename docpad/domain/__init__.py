"""Domain layer: the document session controller, its interfaces and small models."""

from .interfaces import IAppConfig, IConfigService, IFileService, ISettingsService
from .models import SaveChoice
from .session import DocumentSession

__all__ = [
    "DocumentSession",
    "SaveChoice",
    "IFileService",
    "ISettingsService",
    "IConfigService",
    "IAppConfig",
]
