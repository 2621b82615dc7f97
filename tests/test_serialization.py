# tests/test_serialization.py
"""
Tests de la projection en documents.
"""

import json
import threading
from types import SimpleNamespace

import psutil
import pytest

from sysprobe.hardware.base import HardwareAbstractionLayer
from sysprobe.serialization import NullAwareDocument, get_boolean

ALL_ROOT = {'platform': True, 'operatingSystem': True, 'hardware': True}


class TestNullAwareDocument:

    def test_absent_values_are_skipped(self):
        document = (NullAwareDocument()
                    .add('kept', 1)
                    .add('none', None)
                    .add('blank', '   ')
                    .add('zero', 0)
                    .add('false', False)
                    .build())

        assert document == {'kept': 1, 'zero': 0, 'false': False}

    def test_empty_containers_are_kept(self):
        document = NullAwareDocument().add('nested', {}).add('items', []).build()

        assert document == {'nested': {}, 'items': []}

    def test_nested_mappings_are_filtered(self):
        document = NullAwareDocument().add('cpu', {'name': 'x', 'vendor': None, 'id': ''}).build()

        assert document == {'cpu': {'name': 'x'}}

    def test_list_items_are_filtered(self):
        document = NullAwareDocument().add('disks', [{'device': 'sda', 'free': None}, None]).build()

        assert document == {'disks': [{'device': 'sda'}]}

    def test_insertion_order_is_preserved(self):
        builder = NullAwareDocument()
        for name in ('c', 'a', 'b'):
            builder.add(name, name)

        assert list(builder.build()) == ['c', 'a', 'b']

    def test_build_returns_independent_copy(self):
        builder = NullAwareDocument().add('a', 1)
        first = builder.build()
        first['b'] = 2

        assert builder.build() == {'a': 1}

    def test_wrap_accepts_none(self):
        assert NullAwareDocument.wrap(None) == {}


class TestGetBoolean:

    @pytest.mark.parametrize("value", [True, 'true', 'TRUE', ' yes ', '1', 'on'])
    def test_truthy_values(self, value):
        assert get_boolean({'key': value}, 'key') is True

    @pytest.mark.parametrize("value", [False, 'false', 'no', '0', 'off', 'maybe', '', None, 1, 3.5, ['true']])
    def test_falsy_or_malformed_values(self, value):
        assert get_boolean({'key': value}, 'key') is False

    def test_absent_key_is_false(self):
        assert get_boolean({'other': True}, 'key') is False

    @pytest.mark.parametrize("config", [None, {}, ['key'], 'key'])
    def test_missing_or_invalid_config_is_false(self, config):
        assert get_boolean(config, 'key') is False


class TestSystemInfoProjection:

    def test_platform_only(self, fake_system_info):
        document = fake_system_info.to_document({'platform': True, 'operatingSystem': False, 'hardware': False})

        assert document == {'platform': 'LINUX'}
        assert not fake_system_info.is_operating_system_loaded()
        assert not fake_system_info.is_hardware_loaded()

    def test_empty_config_gives_empty_document(self, fake_system_info):
        assert fake_system_info.to_document({}) == {}
        assert fake_system_info.to_document(None) == {}
        assert fake_system_info.os_class.constructions == 0

    def test_all_root_flags(self, fake_system_info):
        document = fake_system_info.to_document(ALL_ROOT)

        assert list(document) == ['platform', 'operatingSystem', 'hardware']
        assert all(value is not None for value in document.values())

    def test_requested_capability_without_fields_is_empty_document(self, fake_system_info):
        document = fake_system_info.to_document({'operatingSystem': True})

        assert document == {'operatingSystem': {}}

    def test_only_requested_capability_is_constructed(self, fake_system_info):
        fake_system_info.to_document({'hardware': 'true', 'hardware.memory': 'true'})

        assert fake_system_info.is_hardware_loaded()
        assert not fake_system_info.is_operating_system_loaded()

    def test_malformed_root_flag_excludes_field(self, fake_system_info):
        assert fake_system_info.to_document({'platform': 'maybe', 'hardware': None}) == {}

    def test_nested_keys_are_forwarded(self, fake_system_info):
        config = dict(ALL_ROOT)
        config.update({
            'operatingSystem.family': True,
            'operatingSystem.version': True,
            'operatingSystem.bootTime': True,
            'hardware.computerSystem': True,
            'hardware.diskStores': True,
        })

        document = fake_system_info.to_document(config)

        assert document['operatingSystem'] == {'family': 'TestOS', 'version': {'version': '1.0'}}
        assert document['hardware'] == {
            'diskStores': [],
            'computerSystem': {'manufacturer': 'Acme', 'firmware_version': '1.2'}
        }

    def test_string_flags_from_ini(self, fake_system_info):
        document = fake_system_info.to_document({
            'operatingSystem': 'true',
            'operatingSystem.hostname': 'yes',
            'operatingSystem.processCount': 'no',
        })

        assert document == {'operatingSystem': {'hostname': 'test-host'}}

    def test_to_json_matches_document(self, fake_system_info):
        config = dict(ALL_ROOT, **{'hardware.memory': True})

        assert json.loads(fake_system_info.to_json(config)) == fake_system_info.to_document(config)

    def test_concurrent_projections_follow_their_own_config(self, fake_system_info):
        configs = [
            {'platform': True},
            {'operatingSystem': True, 'operatingSystem.family': True},
            {'hardware': True, 'hardware.memory': True},
        ]
        expected = [fake_system_info.to_document(config) for config in configs]
        errors = []

        def worker(index):
            for _ in range(200):
                if fake_system_info.to_document(configs[index]) != expected[index]:
                    errors.append(index)

        threads = [threading.Thread(target=worker, args=(i % 3,)) for i in range(12)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=30)

        assert errors == []


class TestOperatingSystemProjection:

    def test_all_fields(self, fake_system_info):
        keys = ['family', 'manufacturer', 'version', 'bitness', 'processCount', 'processId', 'bootTime', 'hostname']
        config = {f'operatingSystem.{key}': True for key in keys}

        document = fake_system_info.get_operating_system().to_document(config)

        # bootTime vaut None dans la variante de test et est omis
        assert list(document) == ['family', 'manufacturer', 'version', 'bitness',
                                  'processCount', 'processId', 'hostname']
        assert document['processCount'] == 42
        assert isinstance(document['processId'], int)

    def test_str(self, fake_system_info):
        assert str(fake_system_info.get_operating_system()) == "Sysprobe TestOS 1.0"


class TestHardwareCollection:
    """Collecte psutil de la classe de base, avec psutil simulé"""

    @pytest.fixture
    def hardware(self, hardware_factory):
        class PsutilHardware(hardware_factory()):
            # Revenir aux implémentations de la classe de base
            get_processor = HardwareAbstractionLayer.get_processor
            get_memory = HardwareAbstractionLayer.get_memory
            get_disk_stores = HardwareAbstractionLayer.get_disk_stores

        return PsutilHardware()

    def test_memory(self, monkeypatch, hardware):
        monkeypatch.setattr(psutil, 'virtual_memory', lambda: SimpleNamespace(total=8000, available=3000))
        monkeypatch.setattr(psutil, 'swap_memory', lambda: SimpleNamespace(total=2000, used=500))

        assert hardware.get_memory() == {
            'total': 8000, 'available': 3000, 'swap_total': 2000, 'swap_used': 500
        }

    def test_memory_failure_is_soft(self, monkeypatch, hardware):
        def broken():
            raise OSError("procfs indisponible")

        monkeypatch.setattr(psutil, 'virtual_memory', broken)
        monkeypatch.setattr(psutil, 'swap_memory', lambda: SimpleNamespace(total=0, used=0))

        assert hardware.get_memory() == {'swap_total': 0, 'swap_used': 0}
        assert any('procfs indisponible' in error for error in hardware.collection_errors)

    def test_errors_reset_on_each_document(self, monkeypatch, hardware):
        def broken():
            raise OSError("procfs indisponible")

        monkeypatch.setattr(psutil, 'virtual_memory', broken)
        monkeypatch.setattr(psutil, 'swap_memory', lambda: SimpleNamespace(total=0, used=0))

        for _ in range(50):
            hardware.to_document({'hardware.memory': 'true'})

        assert len(hardware.collection_errors) == 1

    def test_disk_stores_keep_unreadable_partitions(self, monkeypatch, hardware):
        partitions = [
            SimpleNamespace(device='/dev/sda1', mountpoint='/', fstype='ext4'),
            SimpleNamespace(device='/dev/sdb1', mountpoint='/secret', fstype='xfs'),
        ]

        def disk_usage(mountpoint):
            if mountpoint == '/secret':
                raise PermissionError(mountpoint)
            return SimpleNamespace(total=100, used=40, free=60)

        monkeypatch.setattr(psutil, 'disk_partitions', lambda: partitions)
        monkeypatch.setattr(psutil, 'disk_usage', disk_usage)

        assert hardware.get_disk_stores() == [
            {'device': '/dev/sda1', 'mountpoint': '/', 'filesystem': 'ext4', 'total': 100, 'used': 40, 'free': 60},
            {'device': '/dev/sdb1', 'mountpoint': '/secret', 'filesystem': 'xfs'},
        ]

    def test_processor_combines_identity_and_counts(self, monkeypatch, hardware):
        monkeypatch.setattr(psutil, 'cpu_count', lambda logical=True: 16 if logical else 8)
        monkeypatch.setattr(psutil, 'cpu_freq', lambda: SimpleNamespace(current=1200.0, min=800.0, max=4700.04))

        processor = hardware.get_processor()

        assert processor == {
            'name': 'Test CPU', 'vendor': 'GenuineTest', 'identifier': None,
            'physical_cores': 8, 'logical_cores': 16, 'max_frequency_mhz': 4700.0
        }
        assert hardware.to_document({'hardware.processor': True}) == {
            'processor': {'name': 'Test CPU', 'vendor': 'GenuineTest', 'physical_cores': 8,
                          'logical_cores': 16, 'max_frequency_mhz': 4700.0}
        }
