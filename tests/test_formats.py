import pytest

from buildnumber.errors import BuildNumberConfigurationError
from buildnumber.formats import OutputDialect, OutputSpec, select_output


@pytest.mark.parametrize(
    "requested_type, dialect, file_name",
    [
        ("C", OutputDialect.C, "build_no.h"),
        ("C++", OutputDialect.CPLUSPLUS, "build_no.hpp"),
        ("C#", OutputDialect.CSHARP, "build_no.cs"),
    ],
)
def test_select_output(requested_type, dialect, file_name):
    assert select_output(requested_type) == OutputSpec(dialect, file_name)
    assert OutputDialect.from_token(requested_type) is dialect


@pytest.mark.parametrize("requested_type", [None, "", "c", "c++", "cs", "Java", "C ", "CPP"])
def test_select_output_unsupported(requested_type):
    assert OutputDialect.from_token(requested_type) is None
    with pytest.raises(BuildNumberConfigurationError) as exc_info:
        select_output(requested_type)
    assert "Unsupported output type" in str(exc_info.value)


def test_dialect_template_names():
    assert [dialect.template_name for dialect in OutputDialect] == [
        "build_no.h.j2",
        "build_no.hpp.j2",
        "build_no.cs.j2",
    ]
