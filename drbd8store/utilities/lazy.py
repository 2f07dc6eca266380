def lazy(fn):
    """
    Decorate a method as a property computed on first access, the result
    being cached in the instance "_lazy_<name>" attribute.
    """
    attr_name = "_lazy_" + fn.__name__

    @property
    def _lazyprop(self):
        try:
            return getattr(self, attr_name)
        except AttributeError:
            pass
        value = fn(self)
        setattr(self, attr_name, value)
        return value

    return _lazyprop


def set_lazy(self, attr, value):
    """
    Preset the cached value of the <attr> lazy property of <self>.
    """
    setattr(self, "_lazy_" + attr, value)
