import logging

import drbd8store.core.exceptions as ex
from drbd8store.env import Env
from drbd8store.utilities.proc import checked_call

STATE_CHANGING_VERBS = (
    "up",
    "down",
    "primary",
    "secondary",
    "adjust",
)


class DrbdAdm(object):
    """
    drbdadm command executor. One process per call, no retry: callers
    re-query the resource state to decide what to do next.
    """
    def __init__(self, drbdadm=None, log=None):
        self.drbdadm = drbdadm or Env.syspaths.drbdadm
        self.log = log or logging.getLogger("drbd8store.adm")

    def drbdadm_cmd(self, verb, resource):
        return [self.drbdadm, verb, resource]

    def execute(self, verb, resource):
        if verb not in STATE_CHANGING_VERBS:
            raise ex.Error("unsupported drbdadm action: %s" % verb)
        cmd = self.drbdadm_cmd(verb, resource)
        checked_call(cmd, log=self.log, info=True, outlog=True,
                     errmsg="drbdadm %s %s error" % (verb, resource))

    def up(self, resource):
        self.execute("up", resource)

    def down(self, resource):
        self.execute("down", resource)

    def primary(self, resource):
        self.execute("primary", resource)

    def secondary(self, resource):
        self.execute("secondary", resource)

    def adjust(self, resource):
        self.execute("adjust", resource)

    def sh_ll_dev(self, resource):
        """
        Return the low level device backing <resource>.
        """
        cmd = self.drbdadm_cmd("sh-ll-dev", resource)
        out = checked_call(cmd, log=self.log,
                           errmsg="get low level device error")
        lines = out.strip().splitlines()
        if not lines:
            return
        return lines[-1].strip()
