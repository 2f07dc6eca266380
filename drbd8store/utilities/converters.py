"""
Converters, used by the configuration keywords and the command output.
"""
import re

SIZE_UNITS = ["", "K", "M", "G", "T", "P", "E", "Z"]

TRUE_VALUES = ("yes", "y", "true", "t", "1")
FALSE_VALUES = ("no", "n", "false", "f", "0", "", "none")


def convert_integer(s):
    if s is None:
        return
    try:
        return int(float(s))
    except ValueError:
        return


def convert_list(s):
    """
    Return a list from <s>, a whitespace or comma separated string.
    """
    if s is None:
        return []
    if isinstance(s, list):
        return s
    return [word for word in re.split(r"[\s,]+", s.strip()) if word]


def convert_boolean(s):
    s = str(s).lower()
    if s in TRUE_VALUES:
        return True
    if s in FALSE_VALUES:
        return False
    raise ValueError("convert boolean error: " + s)


def print_size(size, unit="MB", compact=False, precision=3):
    """
    Return a human readable size string, <size> being expressed in <unit>.
    """
    if size is None:
        return "-"
    unit = unit.upper().replace("B", "")
    try:
        idx = SIZE_UNITS.index(unit)
    except ValueError:
        raise ValueError("unsupported unit %s" % unit)
    size = float(size)
    while size >= 1024 and idx < len(SIZE_UNITS) - 1:
        size /= 1024
        idx += 1
    if compact:
        return "%.*g%s" % (precision, size, SIZE_UNITS[idx].lower())
    return "%.*g %sB" % (precision, size, SIZE_UNITS[idx])
