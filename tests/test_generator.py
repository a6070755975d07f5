import pytest

from translator import Parser
from translator.tree.tree import Node, StmtListNode


@pytest.mark.parametrize(
    "program, code",
    [
        ("x = 1 + 2 * 3;", "x = 1+2*3;"),
        ("x = (1 + 2) * 3;", "x = (1+2)*3;"),
        ("x = -(2 + 3);", "x = -(2+3);"),
        ("x = a - b - c;", "x = a-b-c;"),
        ("x = a / (b / c);", "x = a/(b/c);"),
        ("x = 1 + -2;", "x = 1+-2;"),
        ("x = 1 - -2;", "x = 1- -2;"),
        ("x = - -y;", "x = - -y;"),
        ("x = 3.;", "x = 3.;"),
        ("total = 007 * rate1;", "total = 007*rate1;"),
    ],
)
def test_generate(program: str, code: str):
    tree = Parser().parse(program)
    assert tree.generate_code() == code


def test_str_is_code():
    tree = Parser().parse("x   =  y*2 ;")
    assert str(tree) == "x = y*2;"


def test_reparse_generated_code():
    # The code mirrors the tree, so parsing it again gives the same tree
    parser = Parser()
    tree = parser.parse("x = -(a + 2) * b - c / -d;")
    assert parser.parse(tree.generate_code()) == tree


def test_statement_list():
    tree = Parser().parse_all("a = 1;\n\nb = a * 2;")
    assert tree.generate_code() == "a = 1;\nb = a*2;"


def test_empty():
    assert StmtListNode([]).generate_code() == ""
    assert Node().generate_code() == ""
