"""
Implémentations spécifiques macOS

Ce module utilise les outils natifs macOS :
- sysctl pour le processeur et le modèle
- sw_vers pour le numéro de build
- system_profiler pour le numéro de série
"""

import platform
from typing import Dict, Optional

from ..hardware.base import HardwareAbstractionLayer
from ..software.base import OperatingSystem

# Noms commerciaux par version majeure (10.x par version mineure)
CODE_NAMES = {
    '10.12': 'Sierra',
    '10.13': 'High Sierra',
    '10.14': 'Mojave',
    '10.15': 'Catalina',
    '11': 'Big Sur',
    '12': 'Monterey',
    '13': 'Ventura',
    '14': 'Sonoma',
    '15': 'Sequoia',
    '26': 'Tahoe',
}


def code_name_for(version: Optional[str]) -> Optional[str]:
    """Retourne le nom commercial d'une version de macOS"""
    if not version:
        return None
    parts = version.split('.')
    if parts[0] == '10' and len(parts) > 1:
        return CODE_NAMES.get(f"10.{parts[1]}")
    return CODE_NAMES.get(parts[0])


class MacOperatingSystem(OperatingSystem):
    """Système d'exploitation macOS"""

    def __init__(self, config=None, logger=None):
        super().__init__(config, logger)
        self.product_version = platform.mac_ver()[0] or None
        self.build_version = self._execute_command('sw_vers -buildVersion')

    def get_family(self) -> str:
        return 'macOS'

    def get_manufacturer(self) -> str:
        return 'Apple'

    def get_version(self) -> Dict[str, Optional[str]]:
        return {
            'version': self.product_version,
            'build_number': self._clean_string(self.build_version),
            'code_name': code_name_for(self.product_version)
        }


class MacHardwareAbstractionLayer(HardwareAbstractionLayer):
    """Couche matérielle macOS (sysctl)"""

    def _sysctl(self, name: str) -> Optional[str]:
        return self._clean_string(self._execute_command(f"sysctl -n {name}"))

    def _get_processor_identity(self) -> Dict[str, Optional[str]]:
        vendor = self._sysctl('machdep.cpu.vendor')
        identifier = None
        family = self._sysctl('machdep.cpu.family')
        if family:
            identifier = (f"Family {family} Model {self._sysctl('machdep.cpu.model')} "
                          f"Stepping {self._sysctl('machdep.cpu.stepping')}")

        return {
            'name': self._sysctl('machdep.cpu.brand_string'),
            # Apple Silicon ne publie pas machdep.cpu.vendor
            'vendor': vendor or ('Apple' if platform.machine() == 'arm64' else None),
            'identifier': identifier
        }

    def get_computer_system(self) -> Dict[str, Optional[str]]:
        profile = self._parse_key_value(
            self._execute_command('system_profiler SPHardwareDataType'),
            separator=':'
        )

        return {
            'manufacturer': 'Apple Inc.',
            'model': self._sysctl('hw.model'),
            'serial_number': self._clean_string(profile.get('Serial Number (system)')),
            'firmware_version': self._clean_string(profile.get('System Firmware Version'))
        }
