"""
Service layer for the raffle booklet generator.

Services handle everything outside the rendering core: reading the
configuration file, loading the background and font, and writing pages.
"""

from .config_service import ConfigService
from .output_service import OutputService
from .resource_service import ResourceService

__all__ = ['ConfigService', 'OutputService', 'ResourceService']
