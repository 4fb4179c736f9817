import pytest

from xlwgen.errors import GeneratorError
from xlwgen.functionizer import InterfaceSpec, convert_to_function_model, split_words
from xlwgen.registrations import native_registry
from xlwgen.strip import strip_tokens
from xlwgen.tokenizer import Token, TokenType, tokenize

HEADER = """#ifndef TEST_H
#define TEST_H
#include <xlw/MyContainers.h>
using namespace xlw;

//<xlw:libraryname=MyTestLibrary


short // echoes a short
EchoShort(short x // number to be echoed
       );

#endif
"""


def ident(value):
    return Token(TokenType.IDENTIFIER, value)


def comment(value):
    return Token(TokenType.COMMENT, value)


LEFT = Token(TokenType.LEFT)
RIGHT = Token(TokenType.RIGHT)
COMMA = Token(TokenType.COMMA)
SEMI = Token(TokenType.SEMICOLON)


def convert(tokens, name="lib"):
    return convert_to_function_model(tokens, name, native_registry())


def test_split_words():
    assert split_words("  alpha\tbeta  gamma ") == ["alpha", "beta", "gamma"]
    assert split_words(" \t ") == []


def test_sample_header_end_to_end():
    tokens = strip_tokens(tokenize(HEADER))
    spec = convert(tokens, "cppinterface.h")
    assert spec.library_name == "MyTestLibrary"
    assert len(spec.functions) == 1
    function = spec.functions[0]
    assert function.name == "EchoShort"
    assert function.return_type == "short"
    assert function.description.strip() == "echoes a short"
    assert [(a.type, a.name) for a in function.arguments] == [("short", "x")]
    assert function.arguments[0].description.strip() == "number to be echoed"


def test_default_library_name_kept():
    spec = convert([ident("double"), ident("f"), LEFT, RIGHT, SEMI], "mine.h")
    assert spec == InterfaceSpec(
        functions=spec.functions, library_name="mine.h", open_methods=[], close_methods=[]
    )
    assert spec.functions[0].name == "f"


def test_short_libraryname_directive_ignored():
    spec = convert([comment("<xlw:libraryname=A")], "orig")
    assert spec.library_name == "orig"


def test_default_descriptions():
    spec = convert([ident("double"), ident("f"), LEFT, ident("double"), ident("x"), RIGHT])
    function = spec.functions[0]
    assert function.description == "too lazy to comment this function"
    assert function.arguments[0].description == "too lazy to comment this one"


def test_function_flags():
    tokens = [
        ident("double"),
        comment("desc"),
        comment("<xlw:volatile"),
        comment("<xlw:threadsafe"),
        comment("<xlw:help=42"),
        comment("<xlw:macrosheet"),
        comment("<xlw:clustersafe"),
        ident("f"),
        LEFT,
        RIGHT,
    ]
    function = convert(tokens).functions[0]
    assert function.description == "desc"
    assert function.volatile and function.threadsafe
    assert function.macro_sheet and function.cluster_safe
    assert function.help_id == "42"
    assert not function.time


def test_timeall_and_timenone():
    tokens = [
        comment("<xlw:timeall"),
        ident("double"),
        ident("f"),
        LEFT,
        RIGHT,
        comment("<xlw:timenone"),
        ident("double"),
        ident("g"),
        LEFT,
        RIGHT,
    ]
    functions = convert(tokens).functions
    assert [f.time for f in functions] == [True, False]


def test_several_arguments():
    tokens = [
        ident("double"),
        ident("f"),
        LEFT,
        ident("int"),
        ident("a"),
        comment("first"),
        COMMA,
        ident("bool"),
        ident("b"),
        RIGHT,
    ]
    function = convert(tokens).functions[0]
    assert [(a.type, a.name, a.description) for a in function.arguments] == [
        ("int", "a", "first"),
        ("bool", "b", "too lazy to comment this one"),
    ]


def test_plain_second_comment_rejected():
    tokens = [ident("double"), comment("a"), comment("b"), ident("f"), LEFT, RIGHT]
    with pytest.raises(GeneratorError, match="unexpected comment"):
        convert(tokens)


def test_open_and_close_methods():
    tokens = [comment("<xlw:onopen( Start )"), comment("<xlw:onclose(Stop)")]
    spec = convert(tokens)
    assert spec.open_methods == ["Start"]
    assert spec.close_methods == ["Stop"]


@pytest.mark.parametrize(
    "text",
    ["<xlw:onopen(Start", "<xlw:onopen(a b)", "<xlw:onclose()", "<xlw:onclose(x y)"],
)
def test_malformed_open_close(text):
    with pytest.raises(GeneratorError):
        convert([comment(text)])


def test_typeregister_adds_type():
    registry = native_registry()
    convert_to_function_model(
        [comment("<xlw:typeregister(Foo double makeFoo)")], "lib", registry
    )
    registration = registry.get_registration("Foo")
    assert (registration.old_type, registration.converter) == ("double", "makeFoo")
    assert registry.get_chain("Foo") == ["Foo", "double"]


@pytest.mark.parametrize(
    "text", ["<xlw:typeregister(Foo double)", "<xlw:typeregister(Foo double x"]
)
def test_typeregister_syntax_errors(text):
    with pytest.raises(GeneratorError, match="syntax error"):
        convert([comment(text)])


def test_using_namespace_skipped():
    spec = convert([ident("using"), ident("namespace"), ident("xlw;")])
    assert spec.functions == []


@pytest.mark.parametrize(
    "tokens",
    [[ident("using")], [ident("using"), ident("std")], [ident("using"), ident("namespace")]],
)
def test_invalid_using(tokens):
    with pytest.raises(GeneratorError, match="using namespace"):
        convert(tokens)


@pytest.mark.parametrize(
    "token, message",
    [
        (Token(TokenType.AMPERSAND), "ampersand"),
        (COMMA, "comma"),
        (RIGHT, r"unexpected \)"),
        (LEFT, r"unexpected \("),
        (Token(TokenType.CURLYLEFT), "curly"),
    ],
)
def test_unexpected_punctuation(token, message):
    with pytest.raises(GeneratorError, match=message):
        convert([token])


def test_half_declared_function():
    with pytest.raises(GeneratorError, match="half declared"):
        convert([ident("double")])
    with pytest.raises(GeneratorError, match="half declared"):
        convert([ident("double"), ident("f"), LEFT, ident("int")])


def test_missing_left_parenthesis():
    with pytest.raises(GeneratorError, match="left parenthesis expected"):
        convert([ident("double"), ident("f"), SEMI])


def test_missing_argument_name():
    with pytest.raises(GeneratorError, match="argument name expected"):
        convert([ident("double"), ident("f"), LEFT, ident("int"), COMMA, RIGHT])