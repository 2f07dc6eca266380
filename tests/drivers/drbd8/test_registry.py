import pytest
from unittest.mock import call

import drbd8store.core.exceptions as ex
from drbd8store.drivers.drbd8.registry import Registry
from drbd8store.drivers.drbd8.status import CapacityRecord, ConnState, Role
from helpers import (DRBD_OVERVIEW, DRBDSETUP, OVERVIEW_CONNECTED,
                     OVERVIEW_OTHER, STATUS_4M)


@pytest.fixture(scope='function')
def registry():
    return Registry(drbd_overview=DRBD_OVERVIEW, drbdsetup=DRBDSETUP)


@pytest.mark.ci
@pytest.mark.usefixtures('just_call')
class TestRegistry:
    @staticmethod
    def test_default_commands_paths():
        registry = Registry()
        assert registry.overview_cmd() == ['/usr/sbin/drbd-overview']
        assert registry.status_cmd() == ['/sbin/drbdsetup', 'status', '--verbose', '--statistics']

    @staticmethod
    def test_list_resources_runs_drbd_overview(just_call, registry):
        just_call.return_value = (OVERVIEW_CONNECTED + OVERVIEW_OTHER, '', 0)
        resources = registry.list_resources()
        assert sorted(resources) == ['vm-101-disk-1', 'vm-102-disk-1']
        assert just_call.call_args_list == [call([DRBD_OVERVIEW])]

    @staticmethod
    def test_list_resources_filters_by_name(just_call, registry):
        just_call.return_value = (OVERVIEW_CONNECTED + OVERVIEW_OTHER, '', 0)
        assert list(registry.list_resources('vm-102-disk-1')) == ['vm-102-disk-1']

    @staticmethod
    def test_get_resource(just_call, registry):
        just_call.return_value = (OVERVIEW_OTHER, '', 0)
        status = registry.get_resource('vm-102-disk-1')
        assert status.connect == ConnState.CONNECTED
        assert status.role == Role.PRIMARY
        assert status.minor == 2

    @staticmethod
    def test_get_resource_raises_on_unknown_resource(just_call, registry):
        just_call.return_value = (OVERVIEW_OTHER, '', 0)
        with pytest.raises(ex.ResourceNotConfigured) as excinfo:
            registry.get_resource('vm-101-disk-1')
        assert str(excinfo.value) == 'DRBD resource vm-101-disk-1 not defined in DRBD configuration'

    @staticmethod
    def test_list_resources_raises_on_tool_error(just_call, registry):
        just_call.return_value = ('', 'no resources defined!', 10)
        with pytest.raises(ex.ExternalToolError) as excinfo:
            registry.list_resources()
        assert excinfo.value.ret == 10
        assert 'drbd-overview error' in str(excinfo.value)
        assert 'no resources defined!' in str(excinfo.value)

    @staticmethod
    def test_list_resources_raises_on_missing_tool(just_call, registry):
        just_call.return_value = ('', '/usr/bin/drbd-overview: command not found', 1)
        with pytest.raises(ex.ExternalToolError):
            registry.list_resources()

    @staticmethod
    def test_get_capacity_runs_drbdsetup_status(just_call, registry):
        just_call.return_value = (STATUS_4M, '', 0)
        assert registry.get_capacity('vm-101-disk-1') == {
            'vm-101-disk-1': CapacityRecord('vm-101-disk-1', 4194304)
        }
        assert just_call.call_args_list == [
            call([DRBDSETUP, 'status', '--verbose', '--statistics'])
        ]

    @staticmethod
    def test_get_capacity_of_unreported_resource_is_empty(just_call, registry):
        just_call.return_value = (STATUS_4M, '', 0)
        assert registry.get_capacity('vm-102-disk-1') == {}

    @staticmethod
    def test_get_capacity_raises_on_tool_error(just_call, registry):
        just_call.return_value = ('', 'drbdsetup: error', 20)
        with pytest.raises(ex.ExternalToolError) as excinfo:
            registry.get_capacity()
        assert 'drbdsetup error' in str(excinfo.value)

    @staticmethod
    def test_every_query_runs_the_reporter_again(just_call, registry):
        just_call.return_value = (OVERVIEW_CONNECTED, '', 0)
        registry.get_resource('vm-101-disk-1')
        registry.get_resource('vm-101-disk-1')
        assert just_call.call_count == 2
