"""
Interface commune des systèmes d'exploitation

Ce module définit le contrat que chaque plateforme supportée
implémente pour décrire son système d'exploitation.
"""

import os
import platform
import socket
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

import psutil

from ..core.component import PlatformComponent
from ..serialization import NullAwareDocument, SerializableEntity, get_boolean


class OperatingSystem(PlatformComponent, SerializableEntity, ABC):
    """
    Classe de base abstraite pour les systèmes d'exploitation

    Les variantes fournissent la famille, le fabricant et la version ;
    les compteurs communs reposent sur psutil.
    """

    @abstractmethod
    def get_family(self) -> Optional[str]:
        """
        Famille du système (ex: "Ubuntu", "Windows", "macOS")

        Returns:
            str: Nom de la famille
        """
        pass

    @abstractmethod
    def get_manufacturer(self) -> Optional[str]:
        """
        Éditeur du système (ex: "Microsoft", "Apple")

        Returns:
            str: Nom de l'éditeur
        """
        pass

    @abstractmethod
    def get_version(self) -> Dict[str, Optional[str]]:
        """
        Version du système

        Returns:
            dict: Clés 'version', 'build_number' et 'code_name'
        """
        pass

    def get_bitness(self) -> Optional[int]:
        """Nombre de bits du système (32 ou 64)"""
        machine = platform.machine()
        if not machine:
            return None
        return 64 if machine.endswith('64') else 32

    def get_process_count(self) -> Optional[int]:
        return self._safe_execute(lambda: len(psutil.pids()), "Erreur récupération nombre de processus")

    def get_process_id(self) -> int:
        return os.getpid()

    def get_boot_time(self) -> Optional[str]:
        """Date de démarrage du système au format ISO"""
        boot_time = self._safe_execute(psutil.boot_time, "Erreur récupération temps de démarrage")
        if boot_time is None:
            return None
        return datetime.fromtimestamp(boot_time).isoformat()

    def get_hostname(self) -> Optional[str]:
        return self._safe_execute(socket.gethostname, "Erreur récupération hostname")

    def to_document(self, config: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        Projette le système d'exploitation en document

        Chaque champ est contrôlé par une option 'operatingSystem.<champ>'.
        """
        self._start_collection()
        document = NullAwareDocument()

        if get_boolean(config, 'operatingSystem.family'):
            document.add('family', self.get_family())
        if get_boolean(config, 'operatingSystem.manufacturer'):
            document.add('manufacturer', self.get_manufacturer())
        if get_boolean(config, 'operatingSystem.version'):
            document.add('version', self.get_version())
        if get_boolean(config, 'operatingSystem.bitness'):
            document.add('bitness', self.get_bitness())
        if get_boolean(config, 'operatingSystem.processCount'):
            document.add('processCount', self.get_process_count())
        if get_boolean(config, 'operatingSystem.processId'):
            document.add('processId', self.get_process_id())
        if get_boolean(config, 'operatingSystem.bootTime'):
            document.add('bootTime', self.get_boot_time())
        if get_boolean(config, 'operatingSystem.hostname'):
            document.add('hostname', self.get_hostname())

        return document.build()

    def __str__(self) -> str:
        version = self.get_version() or {}
        parts = [self.get_manufacturer(), self.get_family(), version.get('version')]
        return ' '.join(part for part in parts if part)
