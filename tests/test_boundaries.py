"""Tests for boundary detection strategies."""

from reviewpack.boundaries import (
    RegexBoundaryStrategy,
    find_boundaries,
    get_boundary_strategy,
    register_boundary_strategy,
)
from reviewpack.protocols import BoundaryStrategy


def test_python_top_level_definitions():
    text = (
        "import os\n"
        "\n"
        "def load():\n"
        "    pass\n"
        "\n"
        "class Loader:\n"
        "    def method(self):\n"
        "        pass\n"
        "\n"
        "async def fetch():\n"
        "    pass\n"
    )
    assert find_boundaries(text, "python") == [
        text.index("def load"),
        text.index("class Loader"),
        text.index("async def fetch"),
    ]


def test_python_decorators_are_boundaries():
    text = "@app.route('/')\ndef index():\n    return 'ok'\n"
    assert find_boundaries(text, "python") == [0, text.index("def index")]


def test_javascript_declarations():
    text = (
        "export async function foo() {}\n"
        "const bar = (x) => x\n"
        "class Baz {}\n"
        "  function inner() {}\n"
        "let value = 3\n"
    )
    assert find_boundaries(text, "javascript") == [
        0,
        text.index("const bar"),
        text.index("class Baz"),
    ]


def test_typescript_includes_type_declarations():
    text = "export interface User {}\ntype Id = string\nfunction f() {}\n"
    assert find_boundaries(text, "typescript") == [
        0,
        text.index("type Id"),
        text.index("function f"),
    ]


def test_go_functions_and_types():
    text = "package main\n\ntype Server struct {}\n\nfunc main() {}\n"
    assert find_boundaries(text, "go") == [text.index("type Server"), text.index("func main")]


def test_unknown_language_has_no_boundaries():
    assert get_boundary_strategy("cobol") is None
    assert find_boundaries("IDENTIFICATION DIVISION.\n", "cobol") == []


def test_builtin_strategies_satisfy_protocol():
    assert isinstance(get_boundary_strategy("python"), BoundaryStrategy)


def test_registered_strategy_is_used():
    ruby = RegexBoundaryStrategy("ruby", [r"^def\s+\w+", r"^class\s+\w+"])
    register_boundary_strategy(ruby)

    text = "require 'json'\nclass Parser\nend\ndef run\nend\n"
    assert get_boundary_strategy("ruby") is ruby
    assert find_boundaries(text, "ruby") == [text.index("class Parser"), text.index("def run")]
