"""
Implémentations spécifiques Solaris

Ce module utilise les commandes Solaris :
- /etc/release et uname pour le système
- psrinfo pour le processeur
- smbios pour la machine (x86 uniquement)
"""

import platform
from typing import Dict, Optional

from ..hardware.base import HardwareAbstractionLayer
from ..software.base import OperatingSystem


class SolarisOperatingSystem(OperatingSystem):
    """Système d'exploitation Solaris / illumos"""

    def __init__(self, config=None, logger=None):
        super().__init__(config, logger)
        release = self._read_file('/etc/release') or ''
        self.release_line = self._clean_string(release.splitlines()[0]) if release else None

    def get_family(self) -> str:
        if self.release_line and 'illumos' in self.release_line.lower():
            return 'illumos'
        return 'SunOS'

    def get_manufacturer(self) -> str:
        if self.get_family() == 'illumos':
            return 'illumos'
        return 'Oracle'

    def get_version(self) -> Dict[str, Optional[str]]:
        return {
            'version': self._clean_string(platform.release()),
            'build_number': self._clean_string(platform.version()),
            'code_name': self.release_line
        }

    def get_bitness(self) -> Optional[int]:
        bits = self._execute_command('isainfo -b')
        if bits and bits.isdigit():
            return int(bits)
        return super().get_bitness()


class SolarisHardwareAbstractionLayer(HardwareAbstractionLayer):
    """Couche matérielle Solaris (psrinfo, smbios)"""

    def _get_processor_identity(self) -> Dict[str, Optional[str]]:
        name = None
        output = self._execute_command('psrinfo -pv')
        if output:
            # La dernière ligne non vide décrit le modèle
            lines = [line.strip() for line in output.splitlines() if line.strip()]
            if lines:
                name = lines[-1]

        return {
            'name': self._clean_string(name or platform.processor()),
            'vendor': None,
            'identifier': self._clean_string(platform.processor())
        }

    def get_computer_system(self) -> Dict[str, Optional[str]]:
        smbios = self._parse_key_value(self._execute_command('smbios -t SMB_TYPE_SYSTEM'), separator=':')
        bios = self._parse_key_value(self._execute_command('smbios -t SMB_TYPE_BIOS'), separator=':')

        return {
            'manufacturer': self._clean_string(smbios.get('Manufacturer')),
            'model': self._clean_string(smbios.get('Product') or self._execute_command('uname -i')),
            'serial_number': self._clean_string(smbios.get('Serial Number')),
            'firmware_version': self._clean_string(bios.get('Version String'))
        }
