"""
Implémentations spécifiques FreeBSD

Ce module utilise les commandes FreeBSD :
- freebsd-version et uname pour le système
- sysctl pour le processeur
- kenv pour les données SMBIOS
"""

import platform
from typing import Dict, Optional

from ..hardware.base import HardwareAbstractionLayer
from ..software.base import OperatingSystem


class FreeBsdOperatingSystem(OperatingSystem):
    """Système d'exploitation FreeBSD"""

    def __init__(self, config=None, logger=None):
        super().__init__(config, logger)
        # Inclut le niveau de patch userland (ex: 14.1-RELEASE-p3)
        self.userland_version = self._execute_command('freebsd-version -u')

    def get_family(self) -> str:
        return 'FreeBSD'

    def get_manufacturer(self) -> str:
        return 'Unix/BSD'

    def get_version(self) -> Dict[str, Optional[str]]:
        return {
            'version': self._clean_string(self.userland_version or platform.release()),
            'build_number': self._clean_string(self._execute_command('uname -v')),
            'code_name': None
        }


class FreeBsdHardwareAbstractionLayer(HardwareAbstractionLayer):
    """Couche matérielle FreeBSD (sysctl, kenv)"""

    def _kenv(self, name: str) -> Optional[str]:
        return self._clean_string(self._execute_command(f"kenv -q {name}"))

    def _get_processor_identity(self) -> Dict[str, Optional[str]]:
        vendor = None
        identifier = None

        # Ligne du noyau : CPU: ... Origin="GenuineIntel"  Id=0x906ea  Family=0x6 ...
        dmesg = self._read_file('/var/run/dmesg.boot') or ''
        for line in dmesg.splitlines():
            if 'Origin=' in line:
                fields = self._parse_key_value('\n'.join(line.split()))
                vendor = fields.get('Origin')
                if 'Family' in fields:
                    identifier = (f"Family {fields.get('Family')} Model {fields.get('Model')} "
                                  f"Stepping {fields.get('Stepping')}")
                break

        return {
            'name': self._clean_string(self._execute_command('sysctl -n hw.model')),
            'vendor': self._clean_string(vendor),
            'identifier': identifier or self._clean_string(self._execute_command('sysctl -n hw.machine_arch'))
        }

    def get_computer_system(self) -> Dict[str, Optional[str]]:
        return {
            'manufacturer': self._kenv('smbios.system.maker'),
            'model': self._kenv('smbios.system.product'),
            'serial_number': self._kenv('smbios.system.serial'),
            'firmware_version': self._kenv('smbios.bios.version')
        }
