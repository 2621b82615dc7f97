"""
Implémentations spécifiques Windows

Ce module utilise le registre Windows (winreg) et le module platform.
winreg n'est importé qu'à l'usage, le module reste importable
sur les autres plateformes.
"""

import platform
from typing import Dict, Optional

from ..hardware.base import HardwareAbstractionLayer
from ..software.base import OperatingSystem

CURRENT_VERSION_KEY = r"SOFTWARE\Microsoft\Windows NT\CurrentVersion"
PROCESSOR_KEY = r"HARDWARE\DESCRIPTION\System\CentralProcessor\0"
BIOS_KEY = r"HARDWARE\DESCRIPTION\System\BIOS"


def read_registry_values(key_path: str, *names: str) -> Dict[str, Optional[str]]:
    """
    Lit plusieurs valeurs d'une clé HKEY_LOCAL_MACHINE

    Args:
        key_path: Chemin de la clé
        names: Noms des valeurs à lire

    Returns:
        dict: Valeur par nom (None si absente)
    """
    import winreg

    values = dict.fromkeys(names)
    with winreg.OpenKey(winreg.HKEY_LOCAL_MACHINE, key_path) as key:
        for name in names:
            try:
                value = winreg.QueryValueEx(key, name)[0]
            except FileNotFoundError:
                continue
            # REG_MULTI_SZ
            if isinstance(value, list):
                value = ' '.join(value)
            values[name] = str(value)
    return values


class WindowsOperatingSystem(OperatingSystem):
    """Système d'exploitation Windows"""

    def __init__(self, config=None, logger=None):
        super().__init__(config, logger)
        self.current_version = self._safe_execute(
            lambda: read_registry_values(CURRENT_VERSION_KEY, 'ProductName', 'DisplayVersion',
                                         'CurrentBuildNumber', 'UBR'),
            "Erreur lecture registre CurrentVersion",
            {}
        )

    def get_family(self) -> str:
        return 'Windows'

    def get_manufacturer(self) -> str:
        return 'Microsoft'

    def get_version(self) -> Dict[str, Optional[str]]:
        build = self.current_version.get('CurrentBuildNumber') or platform.version()
        ubr = self.current_version.get('UBR')
        if build and ubr:
            build = f"{build}.{ubr}"

        return {
            'version': self._clean_string(platform.release()),
            'build_number': self._clean_string(build),
            'code_name': self._clean_string(self.current_version.get('DisplayVersion'))
        }

    def get_bitness(self) -> Optional[int]:
        machine = platform.machine().upper()
        if machine in ('AMD64', 'ARM64', 'IA64'):
            return 64
        return super().get_bitness()


class WindowsHardwareAbstractionLayer(HardwareAbstractionLayer):
    """Couche matérielle Windows (registre)"""

    def _get_processor_identity(self) -> Dict[str, Optional[str]]:
        values = self._safe_execute(
            lambda: read_registry_values(PROCESSOR_KEY, 'ProcessorNameString', 'VendorIdentifier',
                                         'Identifier'),
            "Erreur lecture registre CentralProcessor",
            {}
        )
        return {
            'name': self._clean_string(values.get('ProcessorNameString') or platform.processor()),
            'vendor': self._clean_string(values.get('VendorIdentifier')),
            'identifier': self._clean_string(values.get('Identifier'))
        }

    def get_computer_system(self) -> Dict[str, Optional[str]]:
        values = self._safe_execute(
            lambda: read_registry_values(BIOS_KEY, 'SystemManufacturer', 'SystemProductName',
                                         'BIOSVersion'),
            "Erreur lecture registre BIOS",
            {}
        )
        return {
            'manufacturer': self._clean_string(values.get('SystemManufacturer')),
            'model': self._clean_string(values.get('SystemProductName')),
            'serial_number': None,
            'firmware_version': self._clean_string(values.get('BIOSVersion'))
        }
