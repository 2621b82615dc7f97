"""
Exceptions de sysprobe
"""


class SysprobeError(Exception):
    """Exception de base pour toutes les erreurs sysprobe"""
    pass


class UnsupportedPlatformError(SysprobeError):
    """
    Levée quand aucune implémentation n'existe pour la plateforme détectée

    Attributes:
        platform: Valeur de PlatformEnum résolue
        os_type: Identifiant brut du système (sys.platform)
    """

    def __init__(self, platform, os_type: str):
        self.platform = platform
        self.os_type = os_type
        name = getattr(platform, "name", str(platform))
        super().__init__(f"Operating system not supported: {name} ({os_type})")
