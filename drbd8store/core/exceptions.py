class Drbd8StoreException(Exception):
    pass

class Error(Drbd8StoreException):
    """ Failed action
    """
    def __init__(self, value=""):
        self.value = value
    def __str__(self):
        return str(self.value)

class Version(Drbd8StoreException):
    """ propagate the version string
    """
    def __init__(self, value=""):
        self.value = value
    def __str__(self):
        return str(self.value)

class Help(Drbd8StoreException):
    """ propagate the requested help message
    """
    def __init__(self, value=""):
        self.value = value
    def __str__(self):
        return str(self.value)

class ConfigError(Error):
    """ Invalid or missing storage configuration
    """

class ExternalToolError(Error):
    """
    An external command could not be executed or exited non-zero.
    The captured output is kept for the error message.
    """
    def __init__(self, cmd=None, ret=1, out="", err="", errmsg=None):
        self.cmd = cmd or []
        self.ret = ret
        self.out = out or ""
        self.err = err or ""
        self.errmsg = errmsg
        value = "%s: '%s' exited with %d" % (
            errmsg or "command failed",
            " ".join(self.cmd),
            ret,
        )
        diag = (self.err or self.out).strip()
        if diag:
            value += ": " + diag
        Error.__init__(self, value)

class ResourceNotConfigured(Error):
    """ The drbd resource is absent from the drbd-overview listing
    """
    def __init__(self, resource):
        self.resource = resource
        Error.__init__(self, "DRBD resource %s not defined in DRBD configuration" % resource)

class ResourceNotReady(Error):
    """ Volume action requested on a resource not up
    """
    def __init__(self, resource, msg=None):
        self.resource = resource
        Error.__init__(self, msg or "DRBD resource %s not up" % resource)

class PeerConflict(Error):
    """ Promotion refused because the peer already holds the Primary role
    """
    def __init__(self, resource):
        self.resource = resource
        Error.__init__(self, "DRBD resource %s peer is primary" % resource)

class UnsupportedFormat(Error):
    pass

class CapacityExceeded(Error):
    pass

class NameMismatch(Error):
    pass

class Unimplemented(Error):
    """ Deliberately unsupported storage operation
    """
