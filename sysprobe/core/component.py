"""
Classe de base pour les implémentations spécifiques à une plateforme

Ce module fournit les utilitaires partagés par toutes les variantes
de OperatingSystem et HardwareAbstractionLayer : exécution sécurisée,
commandes système, lecture de fichiers et nettoyage de chaînes.
"""

import re
import subprocess
from typing import Any, Callable, Dict, Optional

from .logger import get_logger


class PlatformComponent:
    """
    Base commune des composants spécifiques à une plateforme

    Les erreurs de collecte d'une information isolée ne sont jamais
    fatales : elles sont journalisées et l'information vaut None.
    """

    def __init__(self, config=None, logger=None):
        """
        Initialise le composant

        Args:
            config: Instance de ProbeConfig (optionnelle)
            logger: Logger à utiliser (logging.Logger)
        """
        self.config = config
        self.logger = logger or get_logger()
        self.component_name = self.__class__.__name__
        self.collection_errors = []

    def _start_collection(self):
        """
        Démarre une session de collecte

        Les erreurs de la session précédente sont oubliées : les composants
        vivent aussi longtemps que le processus.
        """
        self.collection_errors = []
        self.logger.debug(f"Début collecte {self.component_name}")

    def _safe_execute(self, func: Callable[[], Any], error_message: str = "Erreur lors de l'exécution",
                      default_value=None):
        """
        Exécute une fonction de manière sécurisée avec gestion d'erreur

        Args:
            func: Fonction à exécuter
            error_message: Message d'erreur personnalisé
            default_value: Valeur par défaut en cas d'erreur

        Returns:
            Résultat de la fonction ou default_value
        """
        try:
            return func()
        except Exception as e:
            error_details = f"{self.component_name}: {error_message}: {e}"
            self.collection_errors.append(error_details)
            self.logger.warning(error_details)
            return default_value

    def _command_timeout(self) -> int:
        if self.config is not None:
            return self.config.get_command_timeout()
        return 30

    def _execute_command(self, command: str) -> Optional[str]:
        """
        Exécute une commande système et retourne le résultat

        Args:
            command: Commande à exécuter

        Returns:
            str: Sortie de la commande ou None en cas d'erreur
        """
        try:
            result = subprocess.run(
                command,
                shell=True,
                capture_output=True,
                text=True,
                timeout=self._command_timeout()
            )
        except subprocess.TimeoutExpired:
            self.logger.warning(f"Timeout pour la commande: {command}")
            return None
        except OSError as e:
            self.logger.warning(f"Erreur lors de l'exécution de '{command}': {e}")
            return None

        if result.returncode != 0:
            self.logger.debug(f"Commande échouée: {command} (code: {result.returncode})")
            return None

        return result.stdout.strip()

    def _read_file(self, file_path: str) -> Optional[str]:
        """
        Lit un fichier de manière sécurisée

        Args:
            file_path: Chemin vers le fichier

        Returns:
            str: Contenu du fichier ou None
        """
        try:
            with open(file_path, 'r', encoding='utf-8', errors='replace') as f:
                return f.read().strip()
        except FileNotFoundError:
            self.logger.debug(f"Fichier non trouvé: {file_path}")
            return None
        except PermissionError:
            self.logger.debug(f"Accès refusé: {file_path}")
            return None
        except OSError as e:
            self.logger.warning(f"Erreur lecture fichier {file_path}: {e}")
            return None

    def _clean_string(self, value) -> Optional[str]:
        """
        Nettoie une chaîne de caractères

        Supprime les caractères de contrôle et les espaces multiples.
        Une chaîne vide devient None.
        """
        if value is None:
            return None

        value = ''.join(char for char in str(value) if char.isprintable())
        value = re.sub(r'\s+', ' ', value).strip()

        return value or None

    def _parse_key_value(self, content: Optional[str], separator: str = '=',
                         strip_quotes: bool = True) -> Dict[str, str]:
        """
        Parse un texte de lignes "clé<séparateur>valeur"

        Args:
            content: Texte à analyser
            separator: Séparateur entre clé et valeur
            strip_quotes: Retire les guillemets autour des valeurs

        Returns:
            dict: Paires clé/valeur (première occurrence conservée)
        """
        values = {}
        if not content:
            return values

        for line in content.splitlines():
            if separator not in line:
                continue
            key, value = line.split(separator, 1)
            key = key.strip()
            value = value.strip()
            if strip_quotes:
                value = value.strip('"\'')
            if key and key not in values:
                values[key] = value

        return values
