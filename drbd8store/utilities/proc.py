import logging
from errno import ENOENT, EACCES
from subprocess import Popen, PIPE

import drbd8store.core.exceptions as ex
from drbd8store.env import Env
from drbd8store.utilities.string import bdecode, empty_string

close_fds = True


def justcall(argv=None):
    """
    Call subprocess' Popen(argv, stdout=PIPE, stderr=PIPE)
    Returns (stdout, stderr, returncode).
    A missing or non-executable program is reported as returncode 1.
    """
    if argv is None:
        argv = [Env.syspaths.false]
    try:
        proc = Popen(argv, stdout=PIPE, stderr=PIPE,
                     close_fds=close_fds)
        out, err = proc.communicate()
        return bdecode(out), bdecode(err), proc.returncode
    except OSError as exc:
        if exc.errno == ENOENT:
            return "", "%s: command not found" % argv[0], 1
        if exc.errno == EACCES:
            return "", "%s: command is not executable" % argv[0], 1
        raise


def call(argv,
         log=None,         # callers should provide there own logger
                           # or we'll have to allocate a generic one

         info=False,       # False: log cmd as debug
                           # True:  log cmd as info

         outlog=False,     # False: log stdout as debug
                           # True:  log stdout as info, or error if ret!=0

         errlog=True):     # False: log stderr as debug
                           # True:  log stderr as error if ret!=0, else warning
    """
    Execute the command and return (ret, out, err), logging the command
    and its output through <log>.
    """
    if log is None:
        log = logging.getLogger("drbd8store.call")

    if not argv:
        return 0, "", ""

    cmd = " ".join(argv)
    if info:
        log.info(cmd)
    else:
        log.debug(cmd)

    out, err, ret = justcall(argv)

    if not empty_string(err):
        if not errlog:
            log.debug("stderr:")
            call_log(err, log, "debug")
        elif ret != 0:
            call_log(err, log, "error")
        else:
            log.warning("command successful but stderr:")
            call_log(err, log, "warning")
    if not empty_string(out):
        if not outlog:
            log.debug("output:")
            call_log(out, log, "debug")
        elif ret == 0:
            call_log(out, log, "info")
        else:
            log.error("command failed with stdout:")
            call_log(out, log, "error")

    return ret, out, err


def checked_call(argv, errmsg=None, **kwargs):
    """
    Like call(), but raise ExternalToolError if the command can not be
    executed or exits non-zero. Return the command stdout.
    """
    ret, out, err = call(argv, **kwargs)
    if ret != 0:
        raise ex.ExternalToolError(cmd=argv, ret=ret, out=out, err=err, errmsg=errmsg)
    return out


def call_log(buff="", log=None, level="info"):
    if not buff:
        return
    lines = buff.rstrip().split("\n")
    try:
        fn = getattr(log, level)
    except Exception:
        return
    for line in lines:
        fn("| " + line)
