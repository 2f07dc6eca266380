"""
Volume naming helpers.

The drbd resource name is also the only volume name of the storage, so it
must follow the host image naming convention: vm-<vmid>-disk-<suffix>, with
no whitespace in the suffix.
"""
import re
from collections import namedtuple

import drbd8store.core.exceptions as ex

RE_VOLNAME = re.compile(r"^vm-(\d+)-disk-\S+$")

VolName = namedtuple("VolName", ["vtype", "name", "vmid", "basename", "basevmid", "isbase", "fmt"])


def parse_volname(volname):
    """
    Return a VolName tuple from a volume name, or raise NameMismatch.
    """
    m = RE_VOLNAME.match(volname or "")
    if m is None:
        raise ex.NameMismatch("Invalid volume %s must be *vm-<vmid>-disk-*" % volname)
    return VolName("images", volname, int(m.group(1)), None, None, False, "raw")


def owned_by(name, vmid):
    """
    Return True if <name> is in the vm-<vmid>- namespace.
    """
    return name.startswith("vm-%s-" % vmid)


def split_volid(volid):
    """
    Split a "<storeid>:<volname>" volume id.
    """
    try:
        storeid, volname = volid.split(":", 1)
    except ValueError:
        return None, volid
    return storeid, volname


def fmt_volid(storeid, volname):
    return "%s:%s" % (storeid, volname)
