import pytest

from src.edutrack.edutrack.common.validators import parse_grace_setting, require_grace_minutes
from src.edutrack.edutrack.container import build_container
from src.edutrack.edutrack.core.exceptions import ConfigError


def test_require_grace_minutes_accepts_numbers():
    assert require_grace_minutes(0) == 0
    assert require_grace_minutes(5.0) == 5
    assert require_grace_minutes(2.5) == 2.5


@pytest.mark.parametrize("value", ["5", "", -0.5, float("inf"), None, False, [5]])
def test_require_grace_minutes_rejects(value):
    with pytest.raises(ConfigError):
        require_grace_minutes(value)


def test_parse_grace_setting_reads_env_strings():
    assert parse_grace_setting(" 10 ") == 10
    assert parse_grace_setting("7.5") == 7.5
    assert parse_grace_setting(3) == 3


@pytest.mark.parametrize("value", ["abc", "-1", ""])
def test_parse_grace_setting_rejects(value):
    with pytest.raises(ConfigError):
        parse_grace_setting(value)


def test_container_accepts_env_string_grace():
    assert build_container(grace_minutes="5").grace_minutes == 5
