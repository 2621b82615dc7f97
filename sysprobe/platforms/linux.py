"""
Implémentations spécifiques Linux

Ce module utilise les interfaces Linux :
- /etc/os-release pour la distribution
- /proc/cpuinfo pour le processeur
- /sys/class/dmi/id pour le système et le firmware
"""

import platform
from typing import Dict, Optional

from ..hardware.base import HardwareAbstractionLayer
from ..software.base import OperatingSystem

DMI_PATH = '/sys/class/dmi/id'


class LinuxOperatingSystem(OperatingSystem):
    """
    Système d'exploitation Linux

    Les informations de distribution sont lues une seule fois,
    à la construction.
    """

    def __init__(self, config=None, logger=None):
        super().__init__(config, logger)
        self.os_release = self._parse_key_value(self._read_file('/etc/os-release'))

        # Fallback: /etc/lsb-release (Ubuntu/Debian anciens)
        if not self.os_release:
            lsb = self._parse_key_value(self._read_file('/etc/lsb-release'))
            if lsb:
                self.os_release = {
                    'NAME': lsb.get('DISTRIB_ID'),
                    'VERSION_ID': lsb.get('DISTRIB_RELEASE'),
                    'VERSION_CODENAME': lsb.get('DISTRIB_CODENAME')
                }

    def get_family(self) -> Optional[str]:
        return self._clean_string(self.os_release.get('NAME')) or 'Linux'

    def get_manufacturer(self) -> str:
        return 'GNU/Linux'

    def get_version(self) -> Dict[str, Optional[str]]:
        code_name = self.os_release.get('VERSION_CODENAME')
        if not code_name:
            # "22.04.3 LTS (Jammy Jellyfish)" -> "Jammy Jellyfish"
            version_text = self.os_release.get('VERSION', '')
            if '(' in version_text and version_text.endswith(')'):
                code_name = version_text[version_text.index('(') + 1:-1]

        return {
            'version': self._clean_string(self.os_release.get('VERSION_ID')),
            'build_number': self._clean_string(platform.release()),
            'code_name': self._clean_string(code_name)
        }

    def get_bitness(self) -> Optional[int]:
        long_bit = self._execute_command('getconf LONG_BIT')
        if long_bit and long_bit.isdigit():
            return int(long_bit)
        return super().get_bitness()


class LinuxHardwareAbstractionLayer(HardwareAbstractionLayer):
    """Couche matérielle Linux (procfs et sysfs)"""

    def _get_processor_identity(self) -> Dict[str, Optional[str]]:
        cpuinfo = self._parse_key_value(self._read_file('/proc/cpuinfo'), separator=':')

        identifier = None
        if 'cpu family' in cpuinfo:
            identifier = (f"Family {cpuinfo.get('cpu family')} "
                          f"Model {cpuinfo.get('model')} "
                          f"Stepping {cpuinfo.get('stepping')}")

        return {
            # Sur ARM, 'model name' est souvent absent
            'name': self._clean_string(cpuinfo.get('model name') or cpuinfo.get('Model')
                                       or platform.processor()),
            'vendor': self._clean_string(cpuinfo.get('vendor_id') or cpuinfo.get('CPU implementer')),
            'identifier': identifier
        }

    def _read_dmi(self, name: str) -> Optional[str]:
        return self._clean_string(self._read_file(f"{DMI_PATH}/{name}"))

    def get_computer_system(self) -> Dict[str, Optional[str]]:
        return {
            'manufacturer': self._read_dmi('sys_vendor'),
            'model': self._read_dmi('product_name'),
            # Lisible uniquement par root
            'serial_number': self._read_dmi('product_serial'),
            'firmware_version': self._read_dmi('bios_version')
        }
