import os
import shutil

import pytest

from translator import Code, Environment, Translator
from translator.cli import main
from tests.test_util import data_file

expected_variables = {
    "comments.tl": {"n1": 42.0},
    "decimals.tl": {"rate": 0.25, "total": 11.25},
    "precedence.tl": {"x": 7.0, "y": 9.0, "z": -3.0},
    "unary.tl": {"a": -5.0, "b": -5.0, "c": 2.5},
}


def test_translate():
    translator = Translator()
    assert translator.translate("x = 1 + 2 * 3;")
    assert translator.translate("y = x / 2;")
    assert dict(translator.environment.variables) == {"x": 7.0, "y": 3.5}
    assert translator.code == "x = 1+2*3;\ny = x/2;\n"


def test_translate_continues_after_errors(capsys):
    translator = Translator()
    failures = translator.translate_all(
        ["a = 1;", "b = ;", "c = d;", "d = a + 1;", "e = d * 2;"]
    )

    assert failures == 2
    assert list(translator.environment.variables) == ["a", "d", "e"]
    assert translator.code == "a = 1;\nd = a+1;\ne = d*2;\n"
    err = capsys.readouterr().err
    assert "SyntaxError: " in err
    assert "EvaluationError: Undefined variable: 'd'" in err


def test_translate_file(valid_file: str):
    translator = Translator()
    assert translator.translate_file(valid_file)

    name = os.path.basename(valid_file)
    assert dict(translator.environment.variables) == expected_variables[name]


def test_translate_invalid_file(invalid_file: str, capsys):
    translator = Translator()
    assert not translator.translate_file(invalid_file)
    assert "Error: " in capsys.readouterr().err


def test_translate_file_keeps_earlier_statements():
    translator = Translator()
    assert not translator.translate_file(data_file("invalid", "undefined.tl"))
    assert dict(translator.environment.variables) == {"x": 1.0}
    assert translator.code == "x = 1;\n"


def test_debug(capsys):
    translator = Translator(debug=True)
    assert translator.translate("x = 2;")
    err = capsys.readouterr().err
    assert "program" in err and "fragment" in err


def test_code():
    environment = Environment()
    environment.put("x", 1.0)
    environment.put("y", 2.0)
    code = Code("x = 1;\ny = x*2;\n", environment)

    expected = r"""#include <stdio.h>
int main() {
double x,y;
x = 1;
y = x*2;
printf("x = %g\n", x);
printf("y = %g\n", y);
return 0;
}
"""
    assert code.generate() == expected
    assert str(code) == expected


def test_code_empty():
    code = Translator().output()
    assert code.generate() == "#include <stdio.h>\nint main() {\nreturn 0;\n}\n"


@pytest.mark.skipif(shutil.which("cc") is None, reason="No C compiler available")
def test_code_run():
    translator = Translator()
    translator.translate_all(["x = 1 + 2 * 3;", "y = -(x - 0.5) / 2;"])
    assert translator.output().run() == "x = 7\ny = -3.25\n"


def test_cli(capsys):
    assert main(["x = 1;", "y = x * 2;"]) == 0
    out = capsys.readouterr().out
    assert "double x,y;\nx = 1;\ny = x*2;\n" in out


def test_cli_failure(capsys):
    assert main(["x = 1;", "y = z;"]) == 1
    captured = capsys.readouterr()
    assert "double x;\nx = 1;\n" in captured.out
    assert "Undefined variable: 'z'" in captured.err


def test_cli_files(tmp_path, capsys):
    output = tmp_path / "out.c"
    precedence = data_file("valid", "precedence.tl")
    assert main(["w = 0;", "-f", precedence, "-o", str(output)]) == 0
    assert capsys.readouterr().out == ""
    code = output.read_text(encoding="utf8")
    assert "double w,x,y,z;" in code
    assert "z = x-y-1;" in code


def test_cli_missing_file(tmp_path, capsys):
    assert main(["-f", str(tmp_path / "missing.tl")]) == 1
    assert "Could not read" in capsys.readouterr().err


def test_cli_tokens(capsys):
    assert main(["--tokens", "x = 3.5; // done"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [
        "ID        x",
        "EQ        =",
        "NUM       3.5",
        "SEMICOLON ;",
    ]


def test_translate_deeply_nested(capsys):
    translator = Translator()
    nested = "x = " + "(" * 5000 + "1" + ")" * 5000 + ";"

    failures = translator.translate_all([nested, "y = 2;"])

    assert failures == 1
    assert dict(translator.environment.variables) == {"y": 2.0}
    assert translator.code == "y = 2;\n"
    assert "SyntaxError: The program is nested too deeply." in capsys.readouterr().err


def test_translate_nested():
    translator = Translator()
    assert translator.translate("x = " + "(" * 100 + "1" + ")" * 100 + ";")
    assert translator.environment.variables["x"] == 1.0
