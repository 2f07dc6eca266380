import logging
import os

import pytest

from drbd8store.core.logger import (Drbd8StoreFormatter, initLogger, namer,
                                    rotator, storage_logger, syslog_address)


def make_record(msg, level=logging.INFO, **extra):
    record = logging.LogRecord('drbd8store', level, __file__, 1, msg, None, None)
    for key, val in extra.items():
        setattr(record, key, val)
    return record


@pytest.mark.ci
class TestFormatter:
    @staticmethod
    def test_context_is_built_from_extra():
        formatter = Drbd8StoreFormatter('%(levelname)s %(context)s | %(message)s')
        record = make_record('up', node='n1', storage='drbd101', res='vm-101-disk-1')
        assert formatter.format(record) == 'INFO n:n1 s:drbd101 r:vm-101-disk-1 | up'

    @staticmethod
    def test_human_mode_factorizes_context():
        formatter = Drbd8StoreFormatter()
        formatter.human = True
        assert formatter.format(make_record('up', storage='s1')) == '@ s:s1\n  up'
        assert formatter.format(make_record('down', storage='s1')) == '  down'
        assert formatter.format(make_record('oops', level=logging.WARNING, storage='s1')) == 'W oops'
        assert formatter.format(make_record('boom', level=logging.ERROR)) == 'E boom'


@pytest.mark.ci
class TestInitLogger:
    @staticmethod
    def test_file_and_stream_handlers(tmp_path):
        logfile = os.path.join(str(tmp_path), 'log', 'test.log')
        log = initLogger(root='drbd8store_test_init', logfile=logfile,
                         handlers=['file', 'stream'], debug=True)
        assert log.propagate is False
        assert len(log.handlers) == 2
        log.info('hello')
        for handler in log.handlers:
            handler.flush()
        with open(logfile) as f:
            assert 'hello' in f.read()

    @staticmethod
    def test_init_is_done_once(tmp_path):
        logfile = os.path.join(str(tmp_path), 'test.log')
        log = initLogger(root='drbd8store_test_once', logfile=logfile, handlers=['stream'])
        again = initLogger(root='drbd8store_test_once', logfile=logfile, handlers=['stream', 'file'])
        assert again is log
        assert len(log.handlers) == 1

    @staticmethod
    def test_rotation_compresses(tmp_path):
        source = tmp_path / 'a.log'
        source.write_text('data')
        dest = namer(str(tmp_path / 'a.log.1'))
        rotator(str(source), dest)
        assert dest.endswith('.gz')
        assert os.path.exists(dest)
        assert not source.exists()


@pytest.mark.ci
class TestMisc:
    @staticmethod
    def test_syslog_remote_address():
        assert syslog_address(host='logger') == ('logger', 514)
        assert syslog_address(port=5514) == ('localhost', 5514)

    @staticmethod
    def test_storage_logger_extra():
        log = storage_logger('drbd101', res='vm-101-disk-1')
        assert log.logger.name == 'drbd8store.storage.drbd101'
        assert log.extra['storage'] == 'drbd101'
        assert log.extra['res'] == 'vm-101-disk-1'
