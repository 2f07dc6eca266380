"""
The storage management command actions and options.
"""
from drbd8store.utilities.optparser import OptParser, Option
from drbd8store.utilities.storage import Storage

PROG = "drbd8store"

GLOBAL_OPT = Storage({
    "config": Option(
        "--config", default=None,
        action="store", dest="config",
        help="The storage configuration file path. Defaults to the "
             "DRBD8STORE_CONFIG environment variable value, or "
             "/etc/drbd8store/storage.conf."),
    "debug": Option(
        "--debug", default=False,
        action="store_true", dest="debug",
        help="Increase stream log verbosity up to the debug level."),
    "format": Option(
        "--format", default=None,
        action="store", dest="format",
        help="Specify a data formatter. Possible value is json."),
    "help": Option(
        "-h", "--help", default=None,
        action="store_true", dest="parm_help",
        help="Show this help message and exit"),
})

GLOBAL_OPTS = [GLOBAL_OPT[opt] for opt in GLOBAL_OPT]

OPT = Storage({
    "feature": Option(
        "--feature", default=None,
        action="store", dest="feature",
        help="The volume feature to test, ex: copy."),
    "fmt": Option(
        "--fmt", default="raw",
        action="store", dest="fmt",
        help="The format of the volume to allocate. Only raw is supported."),
    "name": Option(
        "--name", default=None,
        action="store", dest="name",
        help="The name of the volume to allocate. Defaults to the "
             "storage resource name."),
    "size": Option(
        "--size", default="0",
        action="store", dest="size",
        help="The size of the volume to allocate, in kbytes."),
    "snapshot": Option(
        "--snapshot", default=None,
        action="store", dest="snapshot",
        help="The volume snapshot name."),
    "storage": Option(
        "--storage", default=None,
        action="store", dest="storage",
        help="The storage identifier, as in the [storage#<id>] "
             "configuration section name."),
    "vmid": Option(
        "--vmid", default=None,
        action="store", dest="vmid",
        help="The id of the vm owning the volume."),
    "volume": Option(
        "--volume", default=None,
        action="store", dest="volume",
        help="The volume name. Defaults to the storage resource name."),
})
OPT.update(GLOBAL_OPT)

ACTIONS = {
    "Storage actions": {
        "ls": {
            "msg": "List the configured storages.",
        },
        "status": {
            "msg": "Show the storage total, free and used bytes.",
            "options": [
                OPT.storage,
            ],
        },
        "resource": {
            "msg": "Show the drbd-overview state of the storage resource.",
            "options": [
                OPT.storage,
            ],
        },
        "capacity": {
            "msg": "Show the usable size of the storage resource, in bytes.",
            "options": [
                OPT.storage,
            ],
        },
        "path": {
            "msg": "Show the device path, vmid and type of a volume.",
            "options": [
                OPT.snapshot,
                OPT.storage,
                OPT.volume,
            ],
        },
        "alloc": {
            "msg": "Validate a volume allocation request and show the "
                   "allocated volume name.",
            "options": [
                OPT.fmt,
                OPT.name,
                OPT.size,
                OPT.storage,
                OPT.vmid,
            ],
        },
        "activate": {
            "msg": "Bring the storage drbd resource up, in the Secondary role.",
            "options": [
                OPT.storage,
            ],
        },
        "deactivate": {
            "msg": "Demote and bring the storage drbd resource down.",
            "options": [
                OPT.storage,
            ],
        },
        "activate_volume": {
            "msg": "Promote the storage drbd resource to the Primary role.",
            "options": [
                OPT.snapshot,
                OPT.storage,
                OPT.volume,
            ],
        },
        "deactivate_volume": {
            "msg": "Demote the storage drbd resource to the Secondary role.",
            "options": [
                OPT.snapshot,
                OPT.storage,
                OPT.volume,
            ],
        },
        "has_feature": {
            "msg": "Exit 0 if the volume supports the feature, 1 if not.",
            "options": [
                OPT.feature,
                OPT.snapshot,
                OPT.storage,
                OPT.volume,
            ],
        },
        "ll_dev": {
            "msg": "Show the low level device backing the storage drbd "
                   "resource.",
            "options": [
                OPT.storage,
            ],
        },
    },
}


class StorageOptParser(OptParser):
    """
    The storage management command options parser class.
    """
    def __init__(self, args=None, width=78):
        OptParser.__init__(self, args=args, prog=PROG, options=OPT,
                           actions=ACTIONS,
                           global_options=GLOBAL_OPTS,
                           width=width)
