"""
Détection de la plateforme d'exécution

Ce module associe l'environnement courant à l'une des variantes
de plateforme supportées. Le résultat est calculé une seule fois,
à l'import, et reste constant pour toute la durée du processus.
"""

import sys
from enum import Enum


class PlatformEnum(Enum):
    """Énumération des plateformes connues"""
    WINDOWS = "windows"
    LINUX = "linux"
    MACOSX = "macosx"
    SOLARIS = "solaris"
    FREEBSD = "freebsd"
    UNKNOWN = "unknown"


def get_os_type() -> str:
    """Retourne l'identifiant brut du système (sys.platform)"""
    return sys.platform


def detect_platform() -> PlatformEnum:
    """
    Détermine la variante de plateforme à partir de sys.platform

    Ne lève jamais d'exception : un environnement non reconnu
    donne PlatformEnum.UNKNOWN.

    Returns:
        PlatformEnum: Plateforme détectée
    """
    os_type = get_os_type()

    if os_type in ("win32", "cygwin"):
        return PlatformEnum.WINDOWS
    elif os_type.startswith("linux"):
        return PlatformEnum.LINUX
    elif os_type == "darwin":
        return PlatformEnum.MACOSX
    elif os_type.startswith("sunos"):
        return PlatformEnum.SOLARIS
    elif os_type.startswith("freebsd"):
        return PlatformEnum.FREEBSD
    else:
        return PlatformEnum.UNKNOWN


# La plateforme ne change pas en cours d'exécution
CURRENT_PLATFORM = detect_platform()


def get_current_platform() -> PlatformEnum:
    """Retourne la plateforme résolue au démarrage du processus"""
    return CURRENT_PLATFORM
