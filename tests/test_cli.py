import pytest

from xlwgen.cli import main, read_source
from xlwgen.errors import GeneratorError

HEADER = """#ifndef TEST_H
#define TEST_H
#include <xlw/CellMatrix.h>
using namespace xlw;

//<xlw:libraryname=MyTestLibrary

short // echoes a short
EchoShort(short x // number to be echoed
       );

#endif
"""


@pytest.fixture
def interface(tmp_path):
    path = tmp_path / "cppinterface.h"
    path.write_text(HEADER)
    return path


def test_read_source_replaces_control_characters(tmp_path):
    path = tmp_path / "in.h"
    path.write_bytes(b"a\tb\r\nc\xe9d\n")
    assert read_source(str(path)) == "a b \nc d\n"


def test_read_source_missing_file(tmp_path):
    with pytest.raises(GeneratorError, match="input file not found"):
        read_source(str(tmp_path / "absent.h"))


def test_default_output_written_to_working_directory(interface, tmp_path, monkeypatch):
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    assert main([str(interface)]) == 0
    text = (work / "xlwcppinterface.cpp").read_text()
    assert 'const char* LibraryName = "MyTestLibrary";' in text
    assert 'registerEchoShort("xlEchoShort",' in text


def test_explicit_output_file(interface, tmp_path):
    target = tmp_path / "out.cpp"
    assert main([str(interface), str(target)]) == 0
    assert '#include "..\\cppinterface.h"' in target.read_text().splitlines()


def test_clw_option_changes_prefix(interface, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["-c", str(interface)]) == 0
    assert (tmp_path / "clwcppinterface.cpp").exists()
    assert not (tmp_path / "xlwcppinterface.cpp").exists()


def test_unknown_option_is_reported(interface, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["-z", str(interface)]) == 0
    assert "unknown option ignored: -z" in capsys.readouterr().err


def test_usage_error(capsys):
    assert main([]) == -1
    err = capsys.readouterr().err
    assert "***ERROR***" in err
    assert "usage is" in err


def test_missing_input_reported(tmp_path, capsys):
    assert main([str(tmp_path / "absent.h")]) == -1
    assert "input file not found" in capsys.readouterr().err


def test_managed_mode_writes_three_files(interface, tmp_path):
    out = tmp_path / "out"
    out.mkdir()
    assert main(["-m", str(interface), str(out)]) == 0
    header = (out / "mxlwcppinterface.h").read_text()
    assert "mxlw_EchoShort\t\t(" in header.splitlines()
    assert (out / "mxlwcppinterface.cpp").exists()

    native = (out / "xlwcppinterface.cpp").read_text()
    lines = native.splitlines()
    assert '#include "..\\mxlwcppinterface.h"' in lines
    assert 'registermxlw_EchoShort("xlmxlw_EchoShort",' in lines
    assert '"EchoShort",' in lines
    assert 'const char* LibraryName = "MyTestLibrary";' in lines


def test_managed_mode_defaults_to_input_directory(interface, tmp_path):
    assert main(["-m", str(interface)]) == 0
    assert (tmp_path / "mxlwcppinterface.h").exists()
    assert (tmp_path / "xlwcppinterface.cpp").exists()