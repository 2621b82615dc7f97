"""
Point d'entrée principal de sysprobe

SystemInfo instancie à la demande les implémentations spécifiques à la
plateforme de OperatingSystem (logiciel) et HardwareAbstractionLayer
(matériel), une seule fois par instance, puis les partage entre tous
les threads appelants.
"""

import threading
from typing import Any, Dict, Mapping, Optional

from . import detection
from .detection import PlatformEnum
from .exceptions import UnsupportedPlatformError
from .logger import get_logger
from ..hardware.base import HardwareAbstractionLayer
from ..platforms.freebsd import FreeBsdHardwareAbstractionLayer, FreeBsdOperatingSystem
from ..platforms.linux import LinuxHardwareAbstractionLayer, LinuxOperatingSystem
from ..platforms.macos import MacHardwareAbstractionLayer, MacOperatingSystem
from ..platforms.solaris import SolarisHardwareAbstractionLayer, SolarisOperatingSystem
from ..platforms.windows import WindowsHardwareAbstractionLayer, WindowsOperatingSystem
from ..serialization import NullAwareDocument, SerializableEntity, get_boolean
from ..software.base import OperatingSystem


class SystemInfo(SerializableEntity):
    """
    Informations système : façade unique vers le logiciel et le matériel

    Chaque capacité (système d'exploitation, matériel) a son propre verrou :
    la construction de l'une ne bloque jamais l'autre. Une construction
    qui échoue n'est pas mémorisée, l'appel suivant la retente.
    """

    # Une entrée par plateforme supportée ; toute autre valeur est refusée
    OPERATING_SYSTEMS = {
        PlatformEnum.WINDOWS: WindowsOperatingSystem,
        PlatformEnum.LINUX: LinuxOperatingSystem,
        PlatformEnum.MACOSX: MacOperatingSystem,
        PlatformEnum.SOLARIS: SolarisOperatingSystem,
        PlatformEnum.FREEBSD: FreeBsdOperatingSystem,
    }

    HARDWARE_LAYERS = {
        PlatformEnum.WINDOWS: WindowsHardwareAbstractionLayer,
        PlatformEnum.LINUX: LinuxHardwareAbstractionLayer,
        PlatformEnum.MACOSX: MacHardwareAbstractionLayer,
        PlatformEnum.SOLARIS: SolarisHardwareAbstractionLayer,
        PlatformEnum.FREEBSD: FreeBsdHardwareAbstractionLayer,
    }

    def __init__(self, config=None, logger=None):
        """
        Initialise la façade sans construire aucune capacité

        Args:
            config: Instance de ProbeConfig transmise aux variantes (optionnelle)
            logger: Logger à utiliser (logging.Logger)
        """
        self.config = config
        self.logger = logger or get_logger()

        self._operating_system: Optional[OperatingSystem] = None
        self._hardware: Optional[HardwareAbstractionLayer] = None

        self._operating_system_lock = threading.Lock()
        self._hardware_lock = threading.Lock()

    @staticmethod
    def get_current_platform_enum() -> PlatformEnum:
        """
        Retourne la plateforme détectée au démarrage du processus

        Returns:
            PlatformEnum: Plateforme courante
        """
        return detection.CURRENT_PLATFORM

    def get_operating_system(self) -> OperatingSystem:
        """
        Retourne l'instance partagée de OperatingSystem pour la plateforme

        Returns:
            OperatingSystem: Instance construite au premier appel

        Raises:
            UnsupportedPlatformError: Si la plateforme n'a pas d'implémentation
        """
        operating_system = self._operating_system
        if operating_system is None:
            with self._operating_system_lock:
                operating_system = self._operating_system
                if operating_system is None:
                    operating_system = self._create(self.OPERATING_SYSTEMS, "système d'exploitation")
                    self._operating_system = operating_system
        return operating_system

    def get_hardware(self) -> HardwareAbstractionLayer:
        """
        Retourne l'instance partagée de HardwareAbstractionLayer pour la plateforme

        Returns:
            HardwareAbstractionLayer: Instance construite au premier appel

        Raises:
            UnsupportedPlatformError: Si la plateforme n'a pas d'implémentation
        """
        hardware = self._hardware
        if hardware is None:
            with self._hardware_lock:
                hardware = self._hardware
                if hardware is None:
                    hardware = self._create(self.HARDWARE_LAYERS, "matériel")
                    self._hardware = hardware
        return hardware

    def is_operating_system_loaded(self) -> bool:
        return self._operating_system is not None

    def is_hardware_loaded(self) -> bool:
        return self._hardware is not None

    def _create(self, factories: Mapping[PlatformEnum, type], capability: str):
        """
        Construit la variante correspondant à la plateforme courante

        Args:
            factories: Table plateforme -> classe
            capability: Libellé de la capacité pour les logs

        Returns:
            Instance de la variante
        """
        current_platform = self.get_current_platform_enum()
        factory = factories.get(current_platform)

        if factory is None:
            raise UnsupportedPlatformError(current_platform, detection.get_os_type())

        self.logger.debug(f"Construction {capability}: {factory.__name__}")
        try:
            return factory(self.config, self.logger)
        except Exception as e:
            self.logger.error(f"Échec construction {capability} ({factory.__name__}): {e}")
            raise

    def to_document(self, config: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        Projette les informations système en document

        Seules les capacités demandées sont construites : 'platform'
        seul ne déclenche aucune construction.

        Args:
            config: Options de sérialisation ('platform', 'operatingSystem',
                'hardware' et leurs sous-clés)

        Returns:
            dict: Document construit
        """
        document = NullAwareDocument()

        if get_boolean(config, 'platform'):
            document.add('platform', self.get_current_platform_enum().name)
        if get_boolean(config, 'operatingSystem'):
            document.add('operatingSystem', self.get_operating_system().to_document(config))
        if get_boolean(config, 'hardware'):
            document.add('hardware', self.get_hardware().to_document(config))

        return document.build()
