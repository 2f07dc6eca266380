"""
Storage configuration file loader.

    [drbd]
    drbdadm = /sbin/drbdadm

    [syslog]
    facility = daemon

    [storage#drbd100]
    resource = vm-100-disk-1
    content = images
"""
import configparser
import os

import drbd8store.core.exceptions as ex
from drbd8store.core.storagedict import KEYS
from drbd8store.env import Env
from drbd8store.utilities.drivers import driver_import
from drbd8store.utilities.storage import Storage


class StorageConfig(object):
    def __init__(self, path=None):
        self.path = path or Env.paths.storageconf
        self.config = configparser.RawConfigParser()

    def load(self, buff=None):
        """
        Read the configuration file, or the <buff> string if set.
        A missing file is an empty configuration.
        """
        try:
            if buff is not None:
                self.config.read_string(buff, source=self.path)
            elif os.path.exists(self.path):
                with open(self.path, "r") as f:
                    self.config.read_file(f)
        except configparser.Error as exc:
            raise ex.ConfigError("%s: %s" % (self.path, exc))
        return self

    def raw_section(self, section):
        if not self.config.has_section(section):
            return {}
        return dict(self.config.items(section))

    def section(self, name):
        """
        Return the validated <name> global section as a Storage.
        """
        return Storage(KEYS.validate(name, self.raw_section(name)))

    @property
    def drbd(self):
        return self.section("drbd")

    @property
    def syslog(self):
        return self.section("syslog")

    def storage_ids(self):
        ids = []
        for section in self.config.sections():
            if not section.startswith("storage#"):
                continue
            ids.append(section.split("#", 1)[1])
        return sorted(ids)

    def storage(self, storeid):
        """
        Return the validated options of the [storage#<storeid>] section.
        """
        section = "storage#" + storeid
        if not self.config.has_section(section):
            raise ex.ConfigError("storage %s is not defined in %s" % (storeid, self.path))
        raw = self.raw_section(section)
        stype = raw.get("type", KEYS.storage.getkey("type").default)
        # the driver registers its keywords on import
        try:
            driver_import(stype)
        except ex.Error as exc:
            raise ex.ConfigError("%s: unsupported type '%s': %s" % (section, stype, exc))
        try:
            data = KEYS.validate("storage", raw)
        except ex.ConfigError as exc:
            raise ex.ConfigError("%s: %s" % (section, exc))
        return Storage(data)
