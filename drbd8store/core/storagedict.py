"""
Keywords of the storage configuration file sections.
Driver-specific keywords are registered by the drivers.
"""
from drbd8store.core.keywords import KeywordStore

BASE_KEYWORDS = [
    {
        "section": "storage",
        "keyword": "type",
        "default": "drbd8",
        "candidates": ["drbd8"],
        "text": "The storage driver."
    },
    {
        "section": "storage",
        "keyword": "nodes",
        "convert": "list",
        "text": "The list of cluster nodes the storage is available on. "
                "Empty means all nodes."
    },
    {
        "section": "storage",
        "keyword": "shared",
        "convert": "boolean",
        "default": False,
        "text": "Set to true if the storage content is the same on all nodes."
    },
    {
        "section": "storage",
        "keyword": "disable",
        "convert": "boolean",
        "default": False,
        "text": "Set to true to forbid the storage activation."
    },
    {
        "section": "storage",
        "keyword": "content",
        "convert": "list",
        "default": "images",
        "candidates": ["images", "rootdir"],
        "text": "The content types the storage accepts."
    },
    {
        "section": "storage",
        "keyword": "format",
        "default": "raw",
        "candidates": ["raw"],
        "text": "The default volume format."
    },
    {
        "section": "drbd",
        "keyword": "drbdadm",
        "default": "/sbin/drbdadm",
        "text": "The drbdadm command path."
    },
    {
        "section": "drbd",
        "keyword": "drbdsetup",
        "default": "/sbin/drbdsetup",
        "text": "The drbdsetup command path."
    },
    {
        "section": "drbd",
        "keyword": "drbd_overview",
        "default": "/usr/sbin/drbd-overview",
        "text": "The drbd-overview command path."
    },
    {
        "section": "drbd",
        "keyword": "by_res",
        "default": "/dev/drbd/by-res",
        "text": "The directory where the drbd udev rules create the "
                "<resource>/<volume> device symlinks."
    },
    {
        "section": "syslog",
        "keyword": "facility",
        "default": "daemon",
        "text": "The syslog facility to log to."
    },
    {
        "section": "syslog",
        "keyword": "level",
        "default": "info",
        "candidates": ["critical", "error", "warning", "info", "debug"],
        "text": "The minimum level of the records sent to syslog."
    },
    {
        "section": "syslog",
        "keyword": "host",
        "text": "The syslog server. Defaults to the local /dev/log socket."
    },
    {
        "section": "syslog",
        "keyword": "port",
        "convert": "integer",
        "text": "The syslog server port. 514 if host is set."
    },
]

KEYS = KeywordStore(
    name="storage",
    keywords=BASE_KEYWORDS,
)
