"""
The drbd resource lifecycle state machine.

Each operation reads the live resource state, then issues the minimal
ordered sequence of drbdadm commands to reach the requested state. There
is no rollback: a failed operation leaves the resource in the state drbd
reports, and re-running the operation resumes from there.
"""
import logging

import drbd8store.core.exceptions as ex
from drbd8store.drivers.drbd8.adm import DrbdAdm
from drbd8store.drivers.drbd8.registry import Registry
from drbd8store.drivers.drbd8.status import ConnState, Role


class Lifecycle(object):
    def __init__(self, registry=None, adm=None, log=None):
        self.log = log or logging.getLogger("drbd8store.lifecycle")
        self.registry = registry or Registry(log=self.log)
        self.adm = adm or DrbdAdm(log=self.log)

    def activate_storage(self, resource):
        """
        Bring the resource up in the Secondary role. A StandAlone resource
        is adjusted first, to retry the peer connection.
        """
        status = self.registry.get_resource(resource)
        if status.connect == ConnState.STANDALONE:
            self.log.info("drbd resource %s is standalone, adjust", resource)
            self.adm.adjust(resource)
            status = self.registry.get_resource(resource)
            if status.connect == ConnState.STANDALONE:
                self.log.warning("drbd resource %s is still standalone after "
                                 "adjust", resource)

        if status.connect == ConnState.UNCONFIGURED:
            self.adm.up(resource)
            self.adm.secondary(resource)
            status = self.registry.get_resource(resource)
            if status.connect == ConnState.UNCONFIGURED:
                raise ex.ResourceNotReady(
                    resource,
                    "DRBD resource %s still unconfigured after up" % resource,
                )
        else:
            self.log.info("drbd resource %s is already up (%s)",
                          resource, status.connect.value)
        return True

    def deactivate_storage(self, resource):
        """
        Demote then down the resource. Downing a primary is refused by
        drbdadm, so secondary always comes first.
        """
        status = self.registry.get_resource(resource)
        if status.connect == ConnState.UNCONFIGURED:
            self.log.info("drbd resource %s is already down", resource)
            return True
        self.adm.secondary(resource)
        self.adm.down(resource)
        return True

    def activate_volume(self, resource):
        """
        Promote the resource to Primary, unless the peer already is.
        """
        status = self.registry.get_resource(resource)
        if status.connect == ConnState.UNCONFIGURED:
            raise ex.ResourceNotReady(resource)
        if status.peer_role == Role.PRIMARY:
            raise ex.PeerConflict(resource)
        self.adm.primary(resource)
        return True

    def deactivate_volume(self, resource):
        status = self.registry.get_resource(resource)
        if status.connect == ConnState.UNCONFIGURED:
            raise ex.ResourceNotReady(resource)
        self.adm.secondary(resource)
        return True
