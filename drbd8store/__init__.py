"""
DRBD8 storage backend: exposes one replicated DRBD 8 resource as the single
allocatable volume of a virtualization host storage.
"""

version = "1.0.0"
