"""
Logging setup.

Records emitted through storage_logger() carry the node, storage and drbd
resource names. The formatters render them as a "n:<node> s:<storage>
r:<res>" context, and the human stream formatter prints the context only
when it changes.
"""
import gzip
import logging
import logging.handlers
import os
import shutil
import sys

from drbd8store.env import Env

DEFAULT_HANDLERS = ["file", "stream", "syslog"]
CONTEXT_ATTRS = (
    ("node", "n"),
    ("storage", "s"),
    ("res", "r"),
)
LEVEL_MARKERS = {
    "INFO": " ",
    "WARNING": "W",
    "ERROR": "E",
    "DEBUG": "D",
}
LOGFILE_MAX_BYTES = 5 * 1024 * 1024


def namer(name):
    return name + ".gz"


def rotator(source, dest):
    with open(source, "rb") as sf, gzip.open(dest, "wb") as df:
        shutil.copyfileobj(sf, df)
    os.remove(source)


class Drbd8StoreFormatter(logging.Formatter):
    def __init__(self, fmt=None, human=False):
        logging.Formatter.__init__(self, fmt)
        self.human = human
        self.last_context = None

    @staticmethod
    def context(record):
        elements = []
        for attr, key in CONTEXT_ATTRS:
            val = getattr(record, attr, None)
            if val in (None, ""):
                continue
            elements.append("%s:%s" % (key, val))
        return " ".join(elements)

    def format(self, record):
        record.context = self.context(record)
        if not self.human:
            return logging.Formatter.format(self, record)
        buff = ""
        if record.context and record.context != self.last_context:
            buff = "@ %s\n" % record.context
            self.last_context = record.context
        marker = LEVEL_MARKERS.get(record.levelname, record.levelname[0])
        return "%s%s %s" % (buff, marker, record.getMessage())


def file_handler(logfile, level):
    logdir = os.path.dirname(logfile)
    if logdir and not os.path.exists(logdir):
        os.makedirs(logdir)
    handler = logging.handlers.RotatingFileHandler(logfile, maxBytes=LOGFILE_MAX_BYTES,
                                                   backupCount=1)
    handler.rotator = rotator
    handler.namer = namer
    handler.setFormatter(Drbd8StoreFormatter("%(asctime)s %(levelname)s %(context)s | %(message)s"))
    handler.setLevel(level)
    return handler


def stream_handler(level):
    handler = logging.StreamHandler()
    handler.setFormatter(Drbd8StoreFormatter(human=True))
    handler.setLevel(level)
    return handler


def syslog_address(host=None, port=None):
    """
    Return the local syslog socket path if neither <host> nor <port> is set,
    else the (host, port) udp address, completed with defaults.
    """
    if host is None and port is None:
        for path in ("/dev/log", "/var/run/syslog"):
            if os.path.exists(path):
                return os.path.realpath(path)
    return (host or "localhost", port or 514)


def syslog_handler(conf):
    level = getattr(logging, (conf.get("level") or "info").upper(), logging.INFO)
    address = syslog_address(conf.get("host"), conf.get("port"))
    handler = logging.handlers.SysLogHandler(address=address,
                                             facility=conf.get("facility") or "daemon")
    handler.setFormatter(Drbd8StoreFormatter("drbd8store: %(context)s %(message)s"))
    handler.setLevel(level)
    return handler


def initLogger(root="drbd8store", logfile=None, handlers=None, syslog_conf=None, debug=None):
    """
    Setup and return the <root> logger. <syslog_conf> is the validated
    [syslog] configuration section. A logger already setup is returned as is.
    """
    log = logging.getLogger(root)
    if log.handlers:
        return log
    if handlers is None:
        handlers = DEFAULT_HANDLERS
    if debug is None:
        debug = "--debug" in sys.argv
    level = logging.DEBUG if debug else logging.INFO
    Env.loglevel = level

    if "file" in handlers:
        try:
            log.addHandler(file_handler(logfile or Env.paths.logfile, level))
        except PermissionError:
            pass
    if "stream" in handlers:
        log.addHandler(stream_handler(level))
    if "syslog" in handlers:
        try:
            log.addHandler(syslog_handler(syslog_conf or {}))
        except OSError:
            # no syslog daemon listening on the local socket
            pass

    log.propagate = False
    log.setLevel(logging.DEBUG)
    return log


def storage_logger(storeid, res=None, root="drbd8store"):
    """
    Return a LoggerAdapter tagging the records with the storage context.
    """
    extra = {
        "node": Env.nodename,
        "storage": storeid,
        "res": res,
    }
    return logging.LoggerAdapter(logging.getLogger("%s.storage.%s" % (root, storeid)), extra)
