"""
Parsers for the two drbd 8 status reporters.

drbd-overview prints one line per resource:

    <minor>:<resource>/<volume> <cstate> <role>/<peer-role> <dstate>/<peer-dstate> ...

  cstate: Connected, WFConnection, StandAlone or Unconfigured
  roles, dstates: '.' when the resource is not up

drbdsetup status --verbose --statistics prints a block per resource:

    <resource> role:Secondary suspended:no
        write-ordering:flush
      volume:0 minor:5 disk:UpToDate
          size:<usable size in kbytes> read:0 written:0 ...
      <peer> connection:Connected role:Secondary congested:no
      ...

Both parsers are pure. Lines they do not recognize are ignored.
"""
import re
from collections import namedtuple
from enum import Enum

RE_OVERVIEW = re.compile(r"^\s*(\d+):(\S+)/(\d+)\s+(\S+)(?:\s+(\S+))?(?:\s+(\S+))?")
RE_STATUS_HEADER = re.compile(r"^(\S+)\s+(?:node-id:\d+\s+)?role:")
RE_STATUS_SIZE = re.compile(r"^size:(\d+)")


class ConnState(Enum):
    UNCONFIGURED = "Unconfigured"
    CONNECTED = "Connected"
    WFCONNECTION = "WFConnection"
    STANDALONE = "StandAlone"


class Role(Enum):
    UNKNOWN = "Unknown"
    PRIMARY = "Primary"
    SECONDARY = "Secondary"


class DiskState(Enum):
    UNCONFIGURED = "Unconfigured"
    UPTODATE = "UpToDate"


class ResourceStatus(object):
    """
    The live state of a drbd resource, as reported by drbd-overview.
    """
    def __init__(self, name, minor=0, volume=0,
                 connect=ConnState.UNCONFIGURED,
                 role=Role.UNKNOWN,
                 peer_role=Role.UNKNOWN,
                 disk_state=DiskState.UNCONFIGURED,
                 peer_disk_state=DiskState.UNCONFIGURED):
        self.name = name
        self.minor = minor
        self.volume = volume
        self.connect = connect
        self.role = role
        self.peer_role = peer_role
        self.disk_state = disk_state
        self.peer_disk_state = peer_disk_state

    def __repr__(self):
        return "<ResourceStatus %s minor=%d vol=%d %s %s/%s %s/%s>" % (
            self.name, self.minor, self.volume, self.connect.value,
            self.role.value, self.peer_role.value,
            self.disk_state.value, self.peer_disk_state.value,
        )

    def __eq__(self, other):
        if not isinstance(other, ResourceStatus):
            return NotImplemented
        return self.dump() == other.dump()

    @property
    def is_up(self):
        return self.connect != ConnState.UNCONFIGURED

    def dump(self):
        return {
            "name": self.name,
            "minor": self.minor,
            "volume": self.volume,
            "connect": self.connect.value,
            "role": self.role.value,
            "peer_role": self.peer_role.value,
            "disk_state": self.disk_state.value,
            "peer_disk_state": self.peer_disk_state.value,
        }


CapacityRecord = namedtuple("CapacityRecord", ["name", "size"])

# name of the resource whose block is open, awaiting its size line
CapacityParseState = namedtuple("CapacityParseState", ["pending"])
INITIAL_STATE = CapacityParseState(None)


def parse_cstate(token):
    if token == "Unconfigured":
        return ConnState.UNCONFIGURED
    if token == "Connected":
        return ConnState.CONNECTED
    if token == "StandAlone":
        return ConnState.STANDALONE
    return ConnState.WFCONNECTION


def parse_role(token):
    if token == "Primary":
        return Role.PRIMARY
    if token == "Secondary":
        return Role.SECONDARY
    return Role.UNKNOWN


def parse_dstate(token):
    if token == "UpToDate":
        return DiskState.UPTODATE
    return DiskState.UNCONFIGURED


def split_pair(token):
    if token is None:
        return None, None
    local, _, peer = token.partition("/")
    return local, peer or None


def parse_overview_line(line):
    """
    Return a ResourceStatus from a drbd-overview line, or None if the line
    is not a resource line.
    """
    m = RE_OVERVIEW.match(line.strip())
    if m is None:
        return
    minor, name, volume, cstate, roles, dstates = m.groups()
    status = ResourceStatus(name, minor=int(minor), volume=int(volume))
    status.connect = parse_cstate(cstate)
    if status.connect == ConnState.UNCONFIGURED:
        return status
    role, peer_role = split_pair(roles)
    status.role = parse_role(role)
    status.peer_role = parse_role(peer_role)
    dstate, peer_dstate = split_pair(dstates)
    status.disk_state = parse_dstate(dstate)
    status.peer_disk_state = parse_dstate(peer_dstate)
    return status


def parse_overview(lines, name=None):
    """
    Return a {name: ResourceStatus} dict from drbd-overview output lines,
    limited to <name> if set. A resource exposing several volumes is
    represented by its lowest numbered volume line.
    """
    data = {}
    for line in lines:
        status = parse_overview_line(line)
        if status is None:
            continue
        if name is not None and status.name != name:
            continue
        known = data.get(status.name)
        if known is not None and known.volume <= status.volume:
            continue
        data[status.name] = status
    return data


def parse_status_line(state, line):
    """
    Advance the drbdsetup status fold by one line.
    Return (new state, CapacityRecord or None).
    """
    line = line.strip()
    m = RE_STATUS_HEADER.match(line)
    if m is not None:
        return CapacityParseState(m.group(1)), None
    if state.pending is None:
        return state, None
    m = RE_STATUS_SIZE.match(line)
    if m is None:
        return state, None
    # drbdsetup reports kbytes
    record = CapacityRecord(state.pending, int(m.group(1)) * 1024)
    return INITIAL_STATE, record


def parse_status(lines, name=None):
    """
    Return a {name: CapacityRecord} dict from drbdsetup status output lines,
    limited to <name> if set.
    """
    data = {}
    state = INITIAL_STATE
    for line in lines:
        state, record = parse_status_line(state, line)
        if record is None:
            continue
        if name is not None and record.name != name:
            continue
        data[record.name] = record
    return data
