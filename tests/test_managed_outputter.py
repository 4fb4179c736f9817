from xlwgen.function_model import FunctionModel
from xlwgen.managed_outputter import create_managed_output
from xlwgen.registrations import default_registries
from xlwgen.typer import function_typer


def _generate(models, prepare=None):
    native, managed = default_registries()
    if prepare is not None:
        prepare(native, managed)
    descriptions = function_typer(models, managed)
    header, source = create_managed_output(
        descriptions, "dir/interface.h", "Lib", native, managed
    )
    return descriptions, header, source


def _age_model():
    model = FunctionModel("double", "Age", "years since")
    model.add_argument("DateTime", "when", "a date")
    return model


def test_preamble_starts_both_files():
    _, header, source = _generate([_age_model()])
    assert header.startswith("//// \n//// Autogenerated by xlw \n")
    assert source.startswith("//// \n//// Autogenerated by xlw \n")
    assert '#include "interface.h"' in source.splitlines()
    assert "using namespace xlw;" in header.splitlines()


def test_function_is_renamed_and_display_name_kept():
    descriptions, header, _ = _generate([_age_model()])
    assert descriptions[0].function_name == "mxlw_Age"
    assert descriptions[0].display_name == "Age"
    assert "mxlw_Age\t\t(" in header.splitlines()


def test_conversion_chain_written_into_body():
    _, _, source = _generate([_age_model()])
    lines = source.splitlines()
    assert "\t\tdouble whena" in lines
    assert "\t\t\tDateTime when( DateTime::FromOADate(whena ));" in lines
    assert "\t\t\treturn Age(when );" in lines
    assert lines.index("\t\tMANAGED_EXECL_BEGIN") < lines.index("\t\tMANAGED_EXECL_END")


def test_used_managed_namespace_is_imported():
    _, _, source = _generate([_age_model()])
    assert "using namespace System;\n" in source


def test_parent_type_has_no_suffix():
    model = FunctionModel("short", "Echo", "echoes")
    model.add_argument("short", "x", "number")
    _, header, source = _generate([model])
    assert "short xa" not in source
    assert "\t\tshort x //number" in header.splitlines()


def test_void_function_declared_but_not_wrapped():
    model = FunctionModel("void", "Reset", "reset things")
    descriptions, header, source = _generate([model])
    assert descriptions[0].function_name == "Reset"
    assert "void //reset things" in header.splitlines()
    assert "Reset();" in header.splitlines()
    assert "mxlw_Reset" not in source


def test_closing_bracket_once_for_several_arguments():
    model = FunctionModel("double", "F", "f")
    model.add_argument("double", "a", "first")
    model.add_argument("double", "b", "second")
    _, header, source = _generate([model])
    assert header.splitlines().count(" );") == 1
    params = [line for line in source.splitlines() if line.startswith("\t\tdouble ")]
    assert [line.endswith(",") for line in params] == [True, False]


def test_native_includes_in_both_files():
    def prepare(native, managed):
        native.get_chain("ArgumentList")

    _, header, source = _generate([_age_model()], prepare)
    assert "#include <xlw/ArgList.h>\n" in header
    assert "#include <xlw/ArgList.h>\n" in source