"""
Lecture des options de sérialisation
"""

import configparser
from typing import Any, Mapping, Optional


def get_boolean(config: Optional[Mapping[str, Any]], key: str) -> bool:
    """
    Interprète une option de sérialisation comme un booléen

    Une clé absente ou une valeur mal formée vaut False : l'inclusion
    d'un champ doit toujours être demandée explicitement.

    Args:
        config: Options de sérialisation (peut être None)
        key: Nom de l'option

    Returns:
        bool: True si le champ doit être inclus
    """
    if not config:
        return False

    try:
        value = config.get(key)
    except AttributeError:
        return False

    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return configparser.ConfigParser.BOOLEAN_STATES.get(value.strip().lower(), False)
    return False
