import json
import sys

import drbd8store.core.exceptions as ex
from drbd8store.commands.storage.parser import StorageOptParser
from drbd8store.core.config import StorageConfig
from drbd8store.core.logger import initLogger
from drbd8store.core.storage import load_storage
from drbd8store.utilities.converters import print_size


class StorageActions(object):
    """
    The storage command actions. Each action_<name> method returns the data
    to display, and the exit code is 0 unless an exception is raised.
    """
    def __init__(self, options, config):
        self.options = options
        self.config = config
        self.ret = 0
        self._storage = None

    @property
    def storage(self):
        if self._storage is not None:
            return self._storage
        storeid = self.options.storage
        if storeid is None:
            ids = self.config.storage_ids()
            if len(ids) != 1:
                raise ex.Error("--storage is required: %d storages configured" % len(ids))
            storeid = ids[0]
        self._storage = load_storage(storeid, config=self.config)
        return self._storage

    @property
    def volume(self):
        return self.options.volume or self.storage.get_name()

    def action(self, action):
        fn = getattr(self, "action_" + action, None)
        if fn is None:
            raise ex.Error("unsupported action: %s" % action)
        return fn()

    def action_ls(self):
        data = []
        for storeid in self.config.storage_ids():
            options = self.config.storage(storeid)
            data.append({
                "storage": storeid,
                "type": options.type,
                "resource": options.get("resource"),
                "disable": options.disable,
            })
        return data

    def action_status(self):
        total, free, used, active = self.storage.status()
        return {
            "storage": self.storage.storeid,
            "total": total,
            "free": free,
            "used": used,
            "active": active,
        }

    def action_resource(self):
        return self.storage.registry.get_resource(self.storage.get_name()).dump()

    def action_capacity(self):
        return {
            "name": self.storage.get_name(),
            "size": self.storage.get_vol_size(),
        }

    def action_path(self):
        path, vmid, vtype = self.storage.path(self.volume, self.options.snapshot)
        return {
            "path": path,
            "vmid": vmid,
            "vtype": vtype,
        }

    def action_alloc(self):
        if self.options.vmid is None:
            raise ex.Error("--vmid is required")
        return self.storage.alloc_image(self.options.vmid, self.options.fmt,
                                        name=self.options.name,
                                        size=self.options.size)

    def action_activate(self):
        return self.storage.activate_storage()

    def action_deactivate(self):
        return self.storage.deactivate_storage()

    def action_activate_volume(self):
        return self.storage.activate_volume(self.volume, self.options.snapshot)

    def action_deactivate_volume(self):
        return self.storage.deactivate_volume(self.volume, self.options.snapshot)

    def action_has_feature(self):
        if self.options.feature is None:
            raise ex.Error("--feature is required")
        supported = self.storage.volume_has_feature(self.options.feature,
                                                    self.volume,
                                                    self.options.snapshot)
        if not supported:
            self.ret = 1
        return supported

    def action_ll_dev(self):
        return self.storage.get_ll_dev()


def format_human(data):
    if isinstance(data, list):
        return "\n".join(format_human(d) for d in data)
    if isinstance(data, dict):
        buff = []
        for key, val in data.items():
            if key in ("total", "free", "used", "size") and isinstance(val, int):
                val = "%d (%s)" % (val, print_size(val, unit="B", compact=True))
            buff.append("%s: %s" % (key, val))
        return "\n".join(buff)
    if data is None:
        return ""
    return str(data)


def print_data(data, fmt=None):
    if fmt == "json":
        buff = json.dumps(data, indent=4, sort_keys=True)
    elif fmt is None:
        buff = format_human(data)
    else:
        raise ex.Error("unsupported format: %s" % fmt)
    if buff:
        print(buff)


def _main(argv=None):
    optparser = StorageOptParser(argv)
    options, action = optparser.parse_args(argv)

    config = StorageConfig(options.config).load()
    initLogger(syslog_conf=config.syslog, debug=options.debug)

    actions = StorageActions(options, config)
    try:
        data = actions.action(action)
    except KeyboardInterrupt:
        sys.stderr.write("Keyboard Interrupt\n")
        return 1
    print_data(data, options.format)
    return actions.ret


def main(argv=None):
    try:
        return _main(argv=argv)
    except ex.Error as exc:
        print(exc, file=sys.stderr)
        return 1
    except (ex.Version, ex.Help) as exc:
        print(exc)
        return 0


if __name__ == "__main__":
    ret = main()
    sys.exit(ret)
