STORAGE_CONF = """
[drbd]
drbdadm = /usr/bin/drbdadm
drbdsetup = /usr/bin/drbdsetup
drbd_overview = /usr/bin/drbd-overview

[storage#drbd101]
type = drbd8
resource = vm-101-disk-1
content = images
"""

OVERVIEW_CONNECTED = " 1:vm-101-disk-1/0 Connected Secondary/Secondary UpToDate/UpToDate\n"
OVERVIEW_CONNECTED_VOL1 = " 2:vm-101-disk-1/1 Connected Secondary/Secondary UpToDate/UpToDate\n"
OVERVIEW_PRIMARY = " 1:vm-101-disk-1/0 Connected Primary/Secondary UpToDate/UpToDate\n"
OVERVIEW_PEER_PRIMARY = " 1:vm-101-disk-1/0 Connected Secondary/Primary UpToDate/UpToDate\n"
OVERVIEW_WFCONNECTION = " 1:vm-101-disk-1/0 WFConnection Secondary/Unknown UpToDate/DUnknown\n"
OVERVIEW_STANDALONE = " 1:vm-101-disk-1/0 StandAlone Secondary/Unknown UpToDate/DUnknown\n"
OVERVIEW_UNCONFIGURED = " 1:vm-101-disk-1/0 Unconfigured . .\n"
OVERVIEW_OTHER = " 2:vm-102-disk-1/0 Connected Primary/Secondary UpToDate/UpToDate\n"

STATUS_4M = """vm-101-disk-1 role:Secondary suspended:no
    write-ordering:flush
  volume:0 minor:1 disk:UpToDate
      size:4096 read:0 written:0 al-writes:0 bm-writes:0 upper-pending:0
  peer connection:Connected role:Secondary congested:no
    volume:0 replication:Established peer-disk:UpToDate resync-suspended:no
"""

DRBDADM = "/usr/bin/drbdadm"
DRBDSETUP = "/usr/bin/drbdsetup"
DRBD_OVERVIEW = "/usr/bin/drbd-overview"
