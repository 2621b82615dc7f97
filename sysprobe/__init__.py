"""
sysprobe - Informations matériel et système multi-plateforme

Une façade unique (SystemInfo) donne accès au système d'exploitation et
au matériel, en choisissant l'implémentation propre à la plateforme
(Windows, Linux, macOS, Solaris, FreeBSD).
"""

__version__ = "1.0.0"

from .core.config import ProbeConfig
from .core.detection import PlatformEnum
from .core.exceptions import SysprobeError, UnsupportedPlatformError
from .core.logger import ProbeLogger
from .core.system_info import SystemInfo
from .hardware import HardwareAbstractionLayer
from .software import OperatingSystem

__all__ = [
    'SystemInfo',
    'PlatformEnum',
    'OperatingSystem',
    'HardwareAbstractionLayer',
    'ProbeConfig',
    'ProbeLogger',
    'SysprobeError',
    'UnsupportedPlatformError',
]
