import pytest
from pydantic import ValidationError

from buildnumber.config import Configuration, generate_configuration
from buildnumber.errors import BuildNumberUsageError


def test_generate_configuration():
    config = generate_configuration(
        output_path=" /tmp/project ", requested_type="C++", explicit_start=500
    )
    assert config == Configuration(
        output_path="/tmp/project", requested_type="C++", explicit_start=500
    )


def test_configuration_defaults():
    config = generate_configuration()
    assert config.output_path == ""
    assert config.requested_type is None
    assert config.explicit_start is None


def test_configuration_is_immutable():
    config = generate_configuration(output_path="/tmp", requested_type="C")
    with pytest.raises(ValidationError):
        config.requested_type = "C#"


@pytest.mark.parametrize(
    "kwargs, error_match",
    [
        ({"explicit_start": -1}, "explicit_start"),
        ({"bogus": True}, "bogus"),
    ],
)
def test_generate_configuration_invalid(kwargs, error_match):
    with pytest.raises(BuildNumberUsageError) as exc_info:
        generate_configuration(**kwargs)
    assert error_match in str(exc_info.value)
