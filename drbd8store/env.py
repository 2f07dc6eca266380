import os
import socket

from drbd8store.utilities.storage import Storage


class Paths(object):
    def __init__(self, root_path=None):
        if root_path:
            self.pathetc = os.path.join(root_path, "etc")
            self.pathlog = os.path.join(root_path, "log")
        else:
            self.pathetc = "/etc/drbd8store"
            self.pathlog = "/var/log/drbd8store"

        self.storageconf = os.environ.get("DRBD8STORE_CONFIG") or \
            os.path.join(self.pathetc, "storage.conf")
        self.logfile = os.path.join(self.pathlog, "drbd8store.log")


class Env(object):
    """Class to store globals
    """
    nodename = socket.gethostname().lower()
    loglevel = None

    paths = Paths(os.environ.get("DRBD8STORE_ROOT"))

    syspaths = Storage(
        false="/bin/false",
        drbdadm="/sbin/drbdadm",
        drbdsetup="/sbin/drbdsetup",
        drbd_overview="/usr/sbin/drbd-overview",
    )

    # symlinks maintained by the drbd udev rules once a resource is up
    drbd_by_res = "/dev/drbd/by-res"
