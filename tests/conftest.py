# tests/conftest.py
"""
Fixtures pytest partagées pour les tests sysprobe.
"""

import logging
import threading
import time

import pytest

from sysprobe.core import detection
from sysprobe.core.detection import PlatformEnum
from sysprobe.core.logger import LOGGER_NAME
from sysprobe.core.system_info import SystemInfo
from sysprobe.hardware.base import HardwareAbstractionLayer
from sysprobe.software.base import OperatingSystem


def make_operating_system(delay=0.0, failures=0, entered=None, release=None):
    """
    Crée une variante de OperatingSystem qui compte ses constructions

    Args:
        delay: Durée de construction simulée (secondes)
        failures: Nombre de constructions qui échouent avant la première réussite
        entered: Event signalé à l'entrée du constructeur
        release: Event attendu avant de terminer la construction
    """

    class FakeOperatingSystem(OperatingSystem):
        constructions = 0
        remaining_failures = failures
        _counter_lock = threading.Lock()

        def __init__(self, config=None, logger=None):
            cls = type(self)
            with cls._counter_lock:
                cls.constructions += 1
                if cls.remaining_failures > 0:
                    cls.remaining_failures -= 1
                    raise RuntimeError("sous-système natif indisponible")
            if entered is not None:
                entered.set()
            if release is not None:
                release.wait(timeout=10)
            if delay:
                time.sleep(delay)
            super().__init__(config, logger)

        def get_family(self):
            return "TestOS"

        def get_manufacturer(self):
            return "Sysprobe"

        def get_version(self):
            return {'version': '1.0', 'build_number': None, 'code_name': ''}

        def get_bitness(self):
            return 64

        def get_process_count(self):
            return 42

        def get_boot_time(self):
            return None

        def get_hostname(self):
            return "test-host"

    return FakeOperatingSystem


def make_hardware(delay=0.0, failures=0):
    """Crée une variante de HardwareAbstractionLayer qui compte ses constructions"""

    class FakeHardware(HardwareAbstractionLayer):
        constructions = 0
        remaining_failures = failures
        _counter_lock = threading.Lock()

        def __init__(self, config=None, logger=None):
            cls = type(self)
            with cls._counter_lock:
                cls.constructions += 1
                if cls.remaining_failures > 0:
                    cls.remaining_failures -= 1
                    raise RuntimeError("SMC illisible")
            if delay:
                time.sleep(delay)
            super().__init__(config, logger)

        def _get_processor_identity(self):
            return {'name': 'Test CPU', 'vendor': 'GenuineTest', 'identifier': None}

        def get_processor(self):
            return {'name': 'Test CPU', 'vendor': 'GenuineTest', 'logical_cores': 8}

        def get_memory(self):
            return {'total': 1024, 'available': 512}

        def get_disk_stores(self):
            return []

        def get_computer_system(self):
            return {'manufacturer': 'Acme', 'model': None, 'serial_number': '', 'firmware_version': '1.2'}

    return FakeHardware


@pytest.fixture
def operating_system_factory():
    return make_operating_system


@pytest.fixture
def hardware_factory():
    return make_hardware


@pytest.fixture
def install_variants(monkeypatch):
    """
    Installe des variantes de test dans les tables de SystemInfo

    Returns:
        Fonction (operating_system, hardware, platform) -> None
    """

    def install(operating_system=None, hardware=None, platform=PlatformEnum.LINUX):
        monkeypatch.setattr(detection, 'CURRENT_PLATFORM', platform)
        if operating_system is not None:
            monkeypatch.setitem(SystemInfo.OPERATING_SYSTEMS, platform, operating_system)
        if hardware is not None:
            monkeypatch.setitem(SystemInfo.HARDWARE_LAYERS, platform, hardware)

    return install


@pytest.fixture
def fake_system_info(install_variants):
    """SystemInfo sur une plateforme LINUX simulée avec des variantes de test"""
    os_class = make_operating_system()
    hardware_class = make_hardware()
    install_variants(os_class, hardware_class)
    system_info = SystemInfo()
    system_info.os_class = os_class
    system_info.hardware_class = hardware_class
    return system_info


@pytest.fixture
def unsupported_platform(monkeypatch):
    """Force la plateforme résolue à UNKNOWN"""
    monkeypatch.setattr(detection, 'CURRENT_PLATFORM', PlatformEnum.UNKNOWN)
    return PlatformEnum.UNKNOWN


@pytest.fixture(autouse=True)
def reset_probe_logger():
    """Retire les handlers installés par ProbeLogger après chaque test"""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
