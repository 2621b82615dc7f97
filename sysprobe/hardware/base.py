"""
Interface commune de la couche d'abstraction matérielle

Ce module définit le contrat que chaque plateforme supportée
implémente pour décrire le matériel :
- Processeur (CPU)
- Mémoire (RAM et swap)
- Disques et partitions
- Système (fabricant, modèle, firmware)
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional

import psutil

from ..core.component import PlatformComponent
from ..serialization import NullAwareDocument, SerializableEntity, get_boolean


class HardwareAbstractionLayer(PlatformComponent, SerializableEntity, ABC):
    """
    Classe de base abstraite pour la couche matérielle

    Les compteurs multi-plateformes (cores, fréquences, mémoire, disques)
    reposent sur psutil ; l'identité du processeur et du système est
    fournie par chaque plateforme.
    """

    @abstractmethod
    def _get_processor_identity(self) -> Dict[str, Optional[str]]:
        """
        Identité du processeur propre à la plateforme

        Returns:
            dict: Clés 'name', 'vendor' et 'identifier'
        """
        pass

    @abstractmethod
    def get_computer_system(self) -> Dict[str, Optional[str]]:
        """
        Informations sur la machine

        Returns:
            dict: Clés 'manufacturer', 'model', 'serial_number' et 'firmware_version'
        """
        pass

    def get_processor(self) -> Dict[str, Any]:
        """
        Collecte les informations du processeur

        Returns:
            dict: Identité et capacités du processeur
        """
        processor = dict(self._get_processor_identity())

        processor['physical_cores'] = self._safe_execute(
            lambda: psutil.cpu_count(logical=False),
            "Erreur récupération cores physiques"
        )
        processor['logical_cores'] = self._safe_execute(
            lambda: psutil.cpu_count(logical=True),
            "Erreur récupération cores logiques"
        )

        cpu_freq = self._safe_execute(psutil.cpu_freq, "Erreur récupération fréquence CPU")
        if cpu_freq and cpu_freq.max:
            processor['max_frequency_mhz'] = round(cpu_freq.max, 1)

        return processor

    def get_memory(self) -> Dict[str, Any]:
        """
        Collecte les informations mémoire (en octets)

        Returns:
            dict: Mémoire physique et swap
        """
        memory = {}

        virtual_mem = self._safe_execute(psutil.virtual_memory, "Erreur récupération mémoire virtuelle")
        if virtual_mem:
            memory['total'] = virtual_mem.total
            memory['available'] = virtual_mem.available

        swap_mem = self._safe_execute(psutil.swap_memory, "Erreur récupération mémoire swap")
        if swap_mem:
            memory['swap_total'] = swap_mem.total
            memory['swap_used'] = swap_mem.used

        return memory

    def get_disk_stores(self) -> List[Dict[str, Any]]:
        """
        Collecte les partitions montées et leur utilisation

        Returns:
            list: Une entrée par partition
        """
        disks = []

        partitions = self._safe_execute(psutil.disk_partitions, "Erreur récupération partitions", [])

        for partition in partitions:
            disk = {
                'device': partition.device,
                'mountpoint': partition.mountpoint,
                'filesystem': partition.fstype
            }

            try:
                usage = psutil.disk_usage(partition.mountpoint)
                disk['total'] = usage.total
                disk['used'] = usage.used
                disk['free'] = usage.free
            except OSError as e:
                # Partition non accessible : conservée sans utilisation
                self.logger.debug(f"Utilisation indisponible pour {partition.mountpoint}: {e}")

            disks.append(disk)

        return disks

    def to_document(self, config: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        Projette le matériel en document

        Chaque champ est contrôlé par une option 'hardware.<champ>'.
        """
        self._start_collection()
        document = NullAwareDocument()

        if get_boolean(config, 'hardware.processor'):
            document.add('processor', self.get_processor())
        if get_boolean(config, 'hardware.memory'):
            document.add('memory', self.get_memory())
        if get_boolean(config, 'hardware.diskStores'):
            document.add('diskStores', self.get_disk_stores())
        if get_boolean(config, 'hardware.computerSystem'):
            document.add('computerSystem', self.get_computer_system())

        return document.build()
