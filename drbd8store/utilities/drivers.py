import importlib

import drbd8store.core.exceptions as ex

DEFAULT_HEAD = "drbd8store.drivers"


def driver_import(*args, **kwargs):
    """
    Import and return the driver module designated by <args>, ex:
    driver_import("drbd8") => drbd8store.drivers.drbd8
    """
    head = kwargs.get("head", DEFAULT_HEAD)
    elements = [e.lower().replace("-", "") for e in args if e]
    modname = ".".join([head] + elements)
    try:
        return importlib.import_module(modname)
    except ImportError as exc:
        raise ex.Error("driver %s not found: %s" % (".".join(elements), exc))
