import logging

from drbd8store.env import Env
from drbd8store.utilities.proc import checked_call
from drbd8store.drivers.drbd8.status import parse_overview, parse_status
import drbd8store.core.exceptions as ex


class Registry(object):
    """
    Query the live drbd resources state. Nothing is cached: every call
    runs the reporter command again.
    """
    def __init__(self, drbd_overview=None, drbdsetup=None, log=None):
        self.drbd_overview = drbd_overview or Env.syspaths.drbd_overview
        self.drbdsetup = drbdsetup or Env.syspaths.drbdsetup
        self.log = log or logging.getLogger("drbd8store.registry")

    def overview_cmd(self):
        return [self.drbd_overview]

    def status_cmd(self):
        return [self.drbdsetup, "status", "--verbose", "--statistics"]

    def list_resources(self, name=None):
        """
        Return the {name: ResourceStatus} dict of the resources known to
        drbd-overview, limited to <name> if set.
        """
        out = checked_call(self.overview_cmd(), log=self.log,
                           errmsg="drbd-overview error")
        return parse_overview(out.splitlines(), name=name)

    def get_capacity(self, name=None):
        """
        Return the {name: CapacityRecord} dict of the usable resource sizes,
        in bytes, limited to <name> if set.
        """
        out = checked_call(self.status_cmd(), log=self.log,
                           errmsg="drbdsetup error")
        return parse_status(out.splitlines(), name=name)

    def get_resource(self, name):
        """
        Return the ResourceStatus of <name>, or raise ResourceNotConfigured.
        """
        resources = self.list_resources(name)
        try:
            return resources[name]
        except KeyError:
            raise ex.ResourceNotConfigured(name)
