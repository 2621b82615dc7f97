"""
Module de logging pour sysprobe

Ce module fournit un système de logging centralisé avec :
- Rotation automatique des logs
- Différents niveaux de log
- Formatage cohérent
- Support multi-plateforme

Les modules de la bibliothèque utilisent get_logger() et restent
silencieux tant qu'une application n'a pas installé de handlers
(via ProbeLogger par exemple).
"""

import os
import sys
import logging
import logging.handlers

LOGGER_NAME = 'Sysprobe'


class ProbeLogger:
    """
    Gestionnaire de logging pour les applications sysprobe

    Cette classe configure le logger nommé 'Sysprobe' avec rotation
    automatique du fichier et sortie console.
    """

    def __init__(self, config=None):
        """
        Initialise le système de logging

        Args:
            config: Instance de ProbeConfig pour récupérer les paramètres de log
        """
        self.config = config
        self.logger = logging.getLogger(LOGGER_NAME)

        # Éviter la duplication si déjà configuré
        if not self.logger.handlers:
            self._setup_logging()

    def _setup_logging(self):
        """
        Configure le système de logging avec les handlers appropriés

        Configure :
        - Le niveau de log basé sur la configuration
        - La rotation des fichiers de log
        - La sortie console
        """
        if self.config:
            settings = self.config.get_logging_config()
            log_level_str = settings['log_level']
            log_file = settings['log_file']
            max_size = settings['max_log_size']
            backup_count = settings['backup_count']
        else:
            log_level_str = 'INFO'
            log_file = self._get_default_log_file()
            max_size = 10485760  # 10MB
            backup_count = 5

        log_level = getattr(logging, log_level_str.upper(), logging.INFO)
        self.logger.setLevel(log_level)

        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        # Handler pour fichier avec rotation
        try:
            log_dir = os.path.dirname(log_file)
            if log_dir and not os.path.exists(log_dir):
                os.makedirs(log_dir, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_file,
                maxBytes=max_size,
                backupCount=backup_count,
                encoding='utf-8'
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

        except OSError as e:
            sys.stderr.write(f"Erreur lors de la configuration du logging fichier: {e}\n")

        # Console sur stderr : stdout est réservé aux documents JSON
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(logging.Formatter(fmt='%(levelname)s - %(message)s'))
        self.logger.addHandler(console_handler)

        self.logger.debug("Système de logging initialisé")
        if self.config:
            self.logger.debug(f"Niveau de log: {log_level_str}")
            self.logger.debug(f"Fichier de log: {log_file}")

    def _get_default_log_file(self) -> str:
        """
        Détermine le fichier de log par défaut selon la plateforme

        Returns:
            str: Chemin vers le fichier de log par défaut
        """
        if sys.platform == "win32":
            return os.path.join(os.environ.get("TEMP", "C:\\temp"), "sysprobe.log")
        else:
            return "/tmp/sysprobe.log"

    def get_logger(self) -> logging.Logger:
        """
        Retourne l'instance du logger

        Returns:
            logging.Logger: Instance du logger configuré
        """
        return self.logger

    def log_system_info(self):
        """
        Log les informations d'exécution de base au démarrage

        Utile pour le diagnostic et le debug
        """
        self.logger.info(f"Plateforme: {sys.platform}")
        self.logger.info(f"Version Python: {sys.version.split()[0]}")


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Fonction utilitaire pour récupérer un logger nommé

    Args:
        name: Nom du logger

    Returns:
        logging.Logger: Instance du logger
    """
    return logging.getLogger(name)
