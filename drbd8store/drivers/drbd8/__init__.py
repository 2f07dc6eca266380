"""
DRBD 8 storage driver.

The storage exposes a single drbd resource, configured by name, as its only
volume. The resource name must follow the vm-<vmid>-disk-<suffix> image
naming convention, so the storage is reserved to that vm.
"""
import os

import drbd8store.core.exceptions as ex
from drbd8store.core.logger import storage_logger
from drbd8store.core.storage import BaseStorage
from drbd8store.core.storagedict import KEYS
from drbd8store.env import Env
from drbd8store.utilities.lazy import lazy
from drbd8store.utilities.naming import fmt_volid, owned_by, split_volid
from drbd8store.drivers.drbd8.adm import DrbdAdm
from drbd8store.drivers.drbd8.lifecycle import Lifecycle
from drbd8store.drivers.drbd8.registry import Registry

DRIVER_SECTION = "storage"
DRIVER_BASENAME = "drbd8"
KEYWORDS = [
    {
        "keyword": "resource",
        "required": True,
        "text": "The name of the drbd8 resource to use for this storage. It "
                "is the name of the resource file in /etc/drbd.d without the "
                ".res extension, and must match the vm-<vmid>-disk-* pattern, "
                "the '*' part containing no whitespace."
    },
]

KEYS.register_driver(
    DRIVER_SECTION,
    DRIVER_BASENAME,
    keywords=KEYWORDS,
)


class Drbd8Storage(BaseStorage):
    type = "drbd8"
    features = {
        "copy": {"base": True, "current": True},
    }

    @lazy
    def resource(self):
        return self.options.get("resource")

    @lazy
    def log(self):
        return storage_logger(self.storeid, res=self.resource)

    @lazy
    def by_res(self):
        return self.drbd.get("by_res") or Env.drbd_by_res

    @lazy
    def registry(self):
        return Registry(
            drbd_overview=self.drbd.get("drbd_overview"),
            drbdsetup=self.drbd.get("drbdsetup"),
            log=self.log,
        )

    @lazy
    def adm(self):
        return DrbdAdm(drbdadm=self.drbd.get("drbdadm"), log=self.log)

    @lazy
    def lifecycle(self):
        return Lifecycle(registry=self.registry, adm=self.adm, log=self.log)

    def get_name(self):
        return self.resource

    def get_vol_size(self):
        """
        Return the usable size of the resource, in bytes. 0 if drbdsetup
        does not report the resource.
        """
        capacity = self.registry.get_capacity(self.resource)
        try:
            return capacity[self.resource].size
        except KeyError:
            return 0

    def get_ll_dev(self):
        return self.adm.sh_ll_dev(self.resource)

    def device_path(self, resource, volume=0):
        """
        The device path is computed, not checked: the host may ask for it
        before the storage is activated, when the udev symlinks do not
        exist yet.
        """
        return os.path.join(self.by_res, resource, str(volume))

    def resolve_volume(self, resource):
        """
        Return (device path, vmid, size in bytes) of <resource>.
        """
        volname = self.parse_volname(resource)
        status = self.registry.get_resource(resource)
        capacity = self.registry.get_capacity(resource)
        try:
            size = capacity[resource].size
        except KeyError:
            size = 0
        return self.device_path(resource, status.volume), volname.vmid, size

    def path(self, volname, snapname=None):
        """
        Return (device path, vmid, volume type) of <volname>.
        """
        if snapname is not None:
            raise ex.Unimplemented("snapshot is not implemented")
        parsed = self.parse_volname(volname)
        status = self.registry.get_resource(volname)
        return self.device_path(volname, status.volume), parsed.vmid, parsed.vtype

    def alloc_image(self, vmid, fmt, name=None, size=0):
        """
        Nothing is allocated: the whole resource is the volume. Validate the
        request and return the resource name as the volume name.

        <size> is in kbytes.
        """
        if fmt != "raw":
            raise ex.UnsupportedFormat("unsupported format '%s'" % fmt)

        try:
            size = int(size) * 1024
        except (TypeError, ValueError):
            raise ex.Error("invalid size '%s': expected an integer number of kbytes" % size)
        max_size = self.get_vol_size()
        if size > max_size:
            raise ex.CapacityExceeded("Disk size '%d' to big (max: '%d')" % (size, max_size))

        try:
            vmid = int(vmid)
        except (TypeError, ValueError):
            raise ex.NameMismatch("invalid vmid '%s'" % vmid)
        if name and not owned_by(name, vmid):
            raise ex.NameMismatch("illegal name '%s' - should be 'vm-%s-*'" % (name, vmid))

        resource = self.get_name()
        volname = self.parse_volname(resource)
        if volname.vmid != vmid:
            raise ex.NameMismatch("This storage is reserved for VM-ID '%d'" % volname.vmid)

        if name and name != resource:
            self.log.info("requested volume name %s replaced by %s", name, resource)
        self.log.info("allocated volume %s for vm %s", resource, vmid)
        return resource

    def list_images(self, vmid=None, vollist=None):
        name = self.get_name()
        volname = self.parse_volname(name)
        volid = fmt_volid(self.storeid, name)

        if vollist:
            if volid not in vollist:
                return []
        elif vmid is not None and int(vmid) != volname.vmid:
            return []

        return [{
            "volid": volid,
            "format": "raw",
            "size": self.get_vol_size(),
            "vmid": volname.vmid,
        }]

    def status(self, cache=None):
        """
        Return (total, free, used, active). The storage is either fully
        used, when its vm references it, or fully free.
        """
        if cache is None:
            cache = {}
        if not cache.get("size"):
            cache["size"] = self.get_vol_size()
        total = cache["size"]

        volname = self.parse_volname(self.get_name())
        exists = False
        for volid in self.list_disks(volname.vmid):
            storeid, _ = split_volid(volid)
            if storeid == self.storeid:
                exists = True
                break

        if exists:
            return total, 0, total, True
        return total, total, 0, True

    def activate_storage(self):
        self.check_enabled()
        # validate the configured name before touching drbd
        self.parse_volname(self.resource)
        return self.lifecycle.activate_storage(self.resource)

    def deactivate_storage(self):
        return self.lifecycle.deactivate_storage(self.resource)

    def activate_volume(self, volname, snapname=None):
        if snapname is not None:
            raise ex.Unimplemented("snapshot is not implemented")
        return self.lifecycle.activate_volume(volname)

    def deactivate_volume(self, volname, snapname=None):
        if snapname is not None:
            raise ex.Unimplemented("snapshot is not implemented")
        return self.lifecycle.deactivate_volume(volname)


# the name the storage factory looks up
Storage = Drbd8Storage
