from copy import deepcopy
import copyreg


class Storage(dict):
    """
    A dict with attribute access. Missing keys read as None.
    """
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__
    __getitem__ = dict.get
    __getattr__ = dict.get
    __repr__ = lambda self: '<Storage %s>' % dict.__repr__(self)
    __copy__ = lambda self: Storage(self)  # pylint: disable=undefined-variable

    def __deepcopy__(self, memo=None):
        return Storage(deepcopy(dict(self), memo=memo))


def pickle_storage(s):
    return Storage, (dict(s),)


copyreg.pickle(Storage, pickle_storage)
