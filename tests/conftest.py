import os

import pytest  # nopep8

from drbd8store.core.config import StorageConfig
from drbd8store.env import Env
from helpers import STATUS_4M, STORAGE_CONF, OVERVIEW_CONNECTED


@pytest.fixture(scope='function')
def just_call(mocker):
    return mocker.patch('drbd8store.utilities.proc.justcall')


@pytest.fixture(scope='function')
def drbd8store_path_tests(tmpdir, monkeypatch):
    test_dir = str(tmpdir)
    monkeypatch.setattr(Env.paths, 'pathetc', os.path.join(test_dir, 'etc'))
    monkeypatch.setattr(Env.paths, 'pathlog', os.path.join(test_dir, 'log'))
    monkeypatch.setattr(Env.paths, 'storageconf', os.path.join(test_dir, 'etc', 'storage.conf'))
    monkeypatch.setattr(Env.paths, 'logfile', os.path.join(test_dir, 'log', 'drbd8store.log'))
    os.makedirs(Env.paths.pathetc)
    return tmpdir


@pytest.fixture(scope='function')
def storage_conf(drbd8store_path_tests):
    with open(Env.paths.storageconf, 'w') as f:
        f.write(STORAGE_CONF)
    return Env.paths.storageconf


@pytest.fixture(scope='function')
def config():
    return StorageConfig(path='/nonexistent/storage.conf').load(STORAGE_CONF)


@pytest.fixture(scope='function')
def responder(just_call):
    """
    Route the mocked justcall to canned (out, err, ret) answers, by
    command. The overview answers are consumed in order, the last one
    being repeated.
    """
    def func(overviews=None, status=STATUS_4M, fail=None):
        overviews = list(overviews or [OVERVIEW_CONNECTED])
        fail = fail or {}

        def answer(argv=None, **kwargs):
            verb = argv[1] if len(argv) > 1 else None
            if verb in fail:
                return "", fail[verb], 10
            if argv[0].endswith("drbd-overview"):
                if len(overviews) > 1:
                    return overviews.pop(0), "", 0
                return overviews[0], "", 0
            if argv[0].endswith("drbdsetup"):
                return status, "", 0
            if verb == "sh-ll-dev":
                return "/dev/vg0/lv101\n", "", 0
            return "", "", 0

        just_call.side_effect = answer
        return just_call

    return func
