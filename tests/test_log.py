import pytest

from ursa import log


@pytest.fixture(autouse=True)
def _trace_level():
    log.setup(log.TRACE)
    yield
    log.setup(log.TRACE)


def test_logger_name_and_identity():
    logger = log.get_logger()
    assert logger.name == "URSA"
    assert log.get_logger() is logger


def test_setup_sets_level():
    log.setup(log.WARN)
    assert log.get_logger().level == log.WARN
    log.setup(log.TRACE)
    assert log.get_logger().level == log.TRACE


def test_record_format(capsys):
    log.get_logger().error("value %d", 7)
    err = capsys.readouterr().err
    assert err[:2] == "[ "
    timestamp = err[2:10]
    assert [len(part) for part in timestamp.split(":")] == [2, 2, 2]
    assert timestamp.replace(":", "").isdigit()
    assert err[10:] == " ]--[ E ]--[ URSA ]: value 7\n"


def test_repeated_setup_does_not_duplicate_output(capsys):
    log.setup(log.TRACE)
    log.setup(log.TRACE)
    log.get_logger().info("once")
    err = capsys.readouterr().err
    assert err.count("once") == 1


def test_level_filtering(capsys):
    log.setup(log.WARN)
    log.get_logger().info("hidden")
    log.get_logger().warning("shown")
    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "]--[ W ]--[ URSA ]: shown" in err


@pytest.mark.parametrize(
    "level, letter",
    [
        (log.TRACE, "T"),
        (log.DEBUG, "D"),
        (log.INFO, "I"),
        (log.WARN, "W"),
        (log.ERROR, "E"),
        (log.CRITICAL, "C"),
    ],
)
def test_level_letters(capsys, level, letter):
    log.get_logger().log(level, "message")
    err = capsys.readouterr().err
    assert f"]--[ {letter} ]--[ URSA ]: message" in err