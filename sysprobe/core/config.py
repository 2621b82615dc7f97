"""
Module de configuration pour sysprobe

Ce module gère la configuration de la bibliothèque, incluant :
- Lecture du fichier de configuration INI
- Valeurs par défaut
- Options de sérialisation par défaut (section [json])
- Validation des paramètres
"""

import os
import sys
import configparser
from typing import Dict, Any, Optional

from .logger import get_logger


# Options de sérialisation reconnues, toutes activées par défaut
DEFAULT_SERIALIZATION_KEYS = [
    'platform',
    'operatingSystem',
    'operatingSystem.family',
    'operatingSystem.manufacturer',
    'operatingSystem.version',
    'operatingSystem.bitness',
    'operatingSystem.processCount',
    'operatingSystem.processId',
    'operatingSystem.bootTime',
    'operatingSystem.hostname',
    'hardware',
    'hardware.processor',
    'hardware.memory',
    'hardware.diskStores',
    'hardware.computerSystem',
]

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


class ProbeConfig:
    """
    Gestionnaire de configuration pour sysprobe

    Cette classe centralise les paramètres de logging, de collecte,
    de l'interface web et les options de sérialisation par défaut.
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialise la configuration

        Args:
            config_file: Chemin vers le fichier de configuration (optionnel)
        """
        self.logger = get_logger()
        self.config = configparser.ConfigParser()
        # Les clés de sérialisation sont sensibles à la casse
        self.config.optionxform = str
        self.config_file = config_file or self._get_default_config_path()

        self._set_defaults()
        self._load_config()

    def _get_default_config_path(self) -> str:
        """
        Détermine le chemin par défaut du fichier de configuration selon la plateforme

        Returns:
            str: Chemin vers le fichier de configuration
        """
        if sys.platform == "win32":
            return os.path.join(
                os.environ.get("PROGRAMDATA", "C:\\ProgramData"),
                "sysprobe",
                "config.ini"
            )
        else:
            return "/etc/sysprobe/config.ini"

    def _get_default_log_path(self) -> str:
        """
        Détermine le chemin par défaut des logs selon la plateforme

        Returns:
            str: Chemin vers le fichier de log
        """
        if sys.platform == "win32":
            return os.path.join(
                os.environ.get("TEMP", "C:\\temp"),
                "sysprobe.log"
            )
        else:
            return "/tmp/sysprobe.log"

    def _set_defaults(self):
        """
        Définit les valeurs de configuration par défaut

        Ces valeurs sont utilisées si aucun fichier de configuration n'est trouvé
        ou si certaines sections/clés sont manquantes.
        """
        # Configuration logging
        self.config.add_section('logging')
        self.config.set('logging', 'log_level', 'INFO')
        self.config.set('logging', 'log_file', self._get_default_log_path())
        self.config.set('logging', 'max_log_size', '10485760')  # 10MB
        self.config.set('logging', 'backup_count', '5')

        # Configuration collecte
        self.config.add_section('collection')
        self.config.set('collection', 'command_timeout', '30')

        # Configuration interface web
        self.config.add_section('web_interface')
        self.config.set('web_interface', 'host', '127.0.0.1')
        self.config.set('web_interface', 'port', '18744')

        # Options de sérialisation
        self.config.add_section('json')
        for key in DEFAULT_SERIALIZATION_KEYS:
            self.config.set('json', key, 'true')

    def _load_config(self):
        """
        Charge la configuration depuis le fichier

        Si le fichier n'existe pas, utilise les valeurs par défaut.
        En cas d'erreur de lecture, log l'erreur et continue avec les défauts.
        """
        if not os.path.exists(self.config_file):
            self.logger.debug(f"Fichier de configuration non trouvé: {self.config_file}")
            return

        try:
            self.config.read(self.config_file, encoding='utf-8')
            self.logger.info(f"Configuration chargée depuis: {self.config_file}")
        except configparser.Error as e:
            self.logger.error(f"Erreur lors du chargement de la configuration: {e}")
            self.logger.info("Utilisation des valeurs par défaut")

    def get(self, section: str, option: str, fallback: Any = None) -> str:
        """
        Récupère une valeur de configuration

        Args:
            section: Nom de la section
            option: Nom de l'option
            fallback: Valeur par défaut si non trouvée

        Returns:
            str: Valeur de configuration
        """
        return self.config.get(section, option, fallback=fallback)

    def getint(self, section: str, option: str, fallback: int = 0) -> int:
        """Récupère une valeur entière de configuration"""
        try:
            return self.config.getint(section, option, fallback=fallback)
        except ValueError:
            return fallback

    def set(self, section: str, option: str, value: Any):
        """
        Définit une valeur de configuration

        Args:
            section: Nom de la section
            option: Nom de l'option
            value: Nouvelle valeur
        """
        if not self.config.has_section(section):
            self.config.add_section(section)
        self.config.set(section, option, str(value))

    def save(self):
        """
        Sauvegarde la configuration dans le fichier

        Crée les dossiers parents si nécessaire.
        """
        config_dir = os.path.dirname(self.config_file)
        if config_dir and not os.path.exists(config_dir):
            os.makedirs(config_dir, exist_ok=True)

        with open(self.config_file, 'w', encoding='utf-8') as f:
            self.config.write(f)

        self.logger.info(f"Configuration sauvegardée dans: {self.config_file}")

    def get_logging_config(self) -> Dict[str, Any]:
        """
        Récupère la configuration complète du logging

        Returns:
            dict: Configuration logging
        """
        return {
            'log_level': self.get('logging', 'log_level', 'INFO'),
            'log_file': self.get('logging', 'log_file', self._get_default_log_path()),
            'max_log_size': self.getint('logging', 'max_log_size', 10485760),
            'backup_count': self.getint('logging', 'backup_count', 5)
        }

    def get_web_config(self) -> Dict[str, Any]:
        """
        Récupère la configuration complète de l'interface web

        Returns:
            dict: Configuration interface web
        """
        return {
            'host': self.get('web_interface', 'host', '127.0.0.1'),
            'port': self.getint('web_interface', 'port', 18744)
        }

    def get_command_timeout(self) -> int:
        """Délai maximal (secondes) accordé aux commandes système"""
        return self.getint('collection', 'command_timeout', 30)

    def get_serialization_config(self) -> Dict[str, str]:
        """
        Récupère les options de sérialisation de la section [json]

        Les valeurs sont transmises telles quelles ; leur interprétation
        est faite par get_boolean() au moment de la projection.

        Returns:
            dict: Options de sérialisation brutes
        """
        if not self.config.has_section('json'):
            return {}
        return dict(self.config.items('json'))

    def validate(self) -> bool:
        """
        Valide la configuration courante

        Returns:
            bool: True si la configuration est valide, False sinon
        """
        errors = []

        log_level = self.get('logging', 'log_level', '')
        if log_level.upper() not in LOG_LEVELS:
            errors.append("Niveau de log invalide")

        web_port = self.getint('web_interface', 'port', 0)
        if not (1 <= web_port <= 65535):
            errors.append("Port interface web invalide (doit être entre 1 et 65535)")

        if self.get_command_timeout() <= 0:
            errors.append("Délai de commande invalide (doit être positif)")

        for error in errors:
            self.logger.error(f"Erreur de configuration: {error}")

        return not errors


def create_default_config(config_path: str) -> ProbeConfig:
    """
    Crée un fichier de configuration par défaut

    Args:
        config_path: Chemin où créer le fichier de configuration

    Returns:
        ProbeConfig: Instance de configuration créée
    """
    config = ProbeConfig(config_path)
    config.save()
    return config
