"""
The storage drivers parent class, and the storage factory.
"""
import drbd8store.core.exceptions as ex
from drbd8store.core.config import StorageConfig
from drbd8store.core.logger import storage_logger
from drbd8store.utilities.drivers import driver_import
from drbd8store.utilities.lazy import lazy, set_lazy
from drbd8store.utilities.naming import parse_volname


class BaseStorage(object):
    type = None
    content = {"images": True, "rootdir": True}
    formats = ["raw"]
    default_format = "raw"

    # feature => {snap|base|current} => supported
    features = {}

    def __init__(self, storeid=None, options=None, drbd=None, log=None, disk_lister=None):
        self.storeid = storeid
        self.options = options or {}
        self.drbd = drbd or {}
        self.disk_lister = disk_lister
        if log is not None:
            set_lazy(self, "log", log)

    def __str__(self):
        return "<%s %s>" % (self.__class__.__name__, self.storeid)

    @lazy
    def log(self):
        return storage_logger(self.storeid)

    @classmethod
    def plugindata(cls):
        return {
            "content": [cls.content, {"images": True}],
            "format": [dict((fmt, True) for fmt in cls.formats), cls.default_format],
        }

    @property
    def disabled(self):
        return bool(self.options.get("disable"))

    def check_enabled(self):
        if self.disabled:
            raise ex.Error("storage %s is disabled" % self.storeid)

    def parse_volname(self, volname):
        return parse_volname(volname)

    def list_disks(self, vmid):
        """
        Return the volume ids referenced by the <vmid> configuration.
        The vm configuration lookup is delegated to the host.
        """
        if self.disk_lister is None:
            return []
        return self.disk_lister(vmid) or []

    def volume_has_feature(self, feature, volname, snapname=None, running=False):
        volname = self.parse_volname(volname)
        if snapname:
            key = "snap"
        elif volname.isbase:
            key = "base"
        else:
            key = "current"
        return bool(self.features.get(feature, {}).get(key))

    def free_image(self, volname, isbase=False):
        return

    def create_base(self, volname):
        raise ex.Unimplemented("Creating base image is currently unimplemented")

    def clone_image(self, volname, vmid, snap=None):
        raise ex.Unimplemented("can't clone images in this storage")

    def volume_resize(self, volname, size, running=False):
        raise ex.Unimplemented("resize is not implemented")

    def volume_snapshot(self, volname, snap):
        raise ex.Unimplemented("snapshot is not implemented")

    def volume_snapshot_rollback(self, volname, snap):
        raise ex.Unimplemented("snapshot rollback is not implemented")

    def volume_snapshot_delete(self, volname, snap, running=False):
        raise ex.Unimplemented("snapshot delete is not implemented")


def load_storage(storeid, config=None, **kwargs):
    """
    Return the driver instance of the [storage#<storeid>] configuration
    section.
    """
    if config is None:
        config = StorageConfig().load()
    options = config.storage(storeid)
    mod = driver_import(options.type)
    return mod.Storage(storeid=storeid, options=options, drbd=config.drbd, **kwargs)
