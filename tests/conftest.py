import pytest

from spell.compiler import CompileOptions


def fake_script_compiler(source):
    return "/* compiled */" + source


@pytest.fixture
def options():
    return CompileOptions(script_compiler=fake_script_compiler)


@pytest.fixture
def ts_options():
    return CompileOptions(convert_script_extension_to_js=True, script_compiler=fake_script_compiler)
