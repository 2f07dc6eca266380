"""
The module implementing Keyword, Section and KeywordStore classes,
used to declare the storage configuration keywords and their properties,
and to validate configuration sections against them.
"""
import copy

import drbd8store.core.exceptions as ex
from drbd8store.utilities.converters import convert_boolean, convert_integer, \
                                            convert_list

CONVERTERS = {
    "boolean": convert_boolean,
    "integer": convert_integer,
    "list": convert_list,
}


class Keyword(object):
    def __init__(self, section, keyword,
                 rtype=None,
                 required=False,
                 default=None,
                 candidates=None,
                 convert=None,
                 text=""):
        self.section = section
        self.keyword = keyword
        self.rtype = rtype
        self.required = required
        self.default = default
        self.candidates = candidates
        self.convert = convert
        self.text = text

    def __repr__(self):
        return "<Keyword %s.%s>" % (self.section, self.keyword)

    def __getattribute__(self, attr):
        if attr == "default":
            return copy.copy(object.__getattribute__(self, attr))
        return object.__getattribute__(self, attr)

    def to_python(self, value):
        """
        Return <value> converted and checked against the candidates.
        """
        if self.convert is not None:
            try:
                value = CONVERTERS[self.convert](value)
            except ValueError as exc:
                raise ex.ConfigError("%s.%s: %s" % (self.section, self.keyword, exc))
        if self.candidates is None:
            return value
        values = value if isinstance(value, list) else [value]
        for val in values:
            if val not in self.candidates:
                raise ex.ConfigError("%s.%s: invalid value '%s'. candidates: %s" % (
                    self.section, self.keyword, val,
                    ", ".join([str(c) for c in self.candidates])))
        return value


class Section(object):
    def __init__(self, section):
        self.section = section
        self.data = {}
        self.rtypes = set()

    def __repr__(self):
        return "<Section %s keywords:%d>" % (self.section, len(self.data))

    def __iadd__(self, o):
        if not isinstance(o, Keyword):
            return self
        self.data[(o.rtype, o.keyword)] = o
        if o.rtype is not None:
            self.rtypes.add(o.rtype)
        return self

    @property
    def keywords(self):
        return self.data.values()

    def getkeys(self, rtype=None):
        return [k for k in self.keywords if k.rtype is None or k.rtype == rtype]

    def getkey(self, keyword, rtype=None):
        k = None
        if rtype:
            k = self.data.get((rtype, keyword))
        if k is None:
            k = self.data.get((None, keyword))
        return k


class KeywordStore(dict):
    def __init__(self, name=None, keywords=None):
        dict.__init__(self)
        self.name = name
        self.sections = {}
        for keyword in keywords or []:
            self.add_keyword(keyword)

    def __str__(self):
        return "<KeywordStore name:%s sections:%d>" % (self.name, len(self.sections))

    def add_keyword(self, keyword, rtype=None):
        data = dict(keyword)
        if rtype is not None:
            data["rtype"] = rtype
        try:
            self += Keyword(**data)
        except TypeError as exc:
            raise ex.Error("misformatted keyword definition: %s: %s" % (exc, data))

    def register_driver(self, section, rtype, keywords=None):
        for keyword in keywords or []:
            data = dict(keyword)
            data["section"] = section
            self.add_keyword(data, rtype=rtype)

    def __iadd__(self, o):
        if o.section not in self.sections:
            self.sections[o.section] = Section(o.section)
        self.sections[o.section] += o
        return self

    def __getattr__(self, key):
        return self.sections[str(key)]

    def __getitem__(self, key):
        return self.sections[str(key)]

    def validate(self, section, data, rtype=None):
        """
        Return a dict of converted values for the <data> keyword/value dict,
        completed with defaults. Raise ConfigError on missing required
        keywords, unknown keywords and invalid values.
        """
        if section not in self.sections:
            raise ex.ConfigError("unknown section %s" % section)
        sect = self.sections[section]
        if rtype is None and sect.getkey("type") is not None:
            rtype = data.get("type", sect.getkey("type").default)
        if rtype is not None and sect.rtypes and rtype not in sect.rtypes:
            raise ex.ConfigError("%s: unsupported type '%s'. candidates: %s" % (
                section, rtype, ", ".join(sorted(sect.rtypes))))
        result = {}
        for keyword, value in data.items():
            key = sect.getkey(keyword, rtype)
            if key is None:
                raise ex.ConfigError("%s: unknown keyword '%s'" % (section, keyword))
            result[keyword] = key.to_python(value)
        for key in sect.getkeys(rtype):
            if key.keyword in result:
                continue
            if key.required:
                raise ex.ConfigError("%s: missing required keyword '%s'" % (section, key.keyword))
            if key.default is not None:
                result[key.keyword] = key.to_python(key.default)
            else:
                result[key.keyword] = None
        return result
