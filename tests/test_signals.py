from __future__ import annotations

from core.models import Signals
from core.signals import (
    closes_block,
    data_structure_tags,
    defines_function,
    extract_signals,
    function_name,
    opens_loop,
)


def test_empty_input_yields_zero_signals() -> None:
    assert extract_signals("") == Signals()
    assert extract_signals("\n\n   \n") == Signals()


def test_counts_nested_python_loops() -> None:
    code = "for i in range(n):\n  for j in range(n):\n    print(i,j)"
    signals = extract_signals(code)
    assert signals.max_nested_loops == 2
    assert signals.has_recursion is False
    assert signals.data_structures == ()


def test_braced_loops_close_on_brace() -> None:
    code = (
        "for (i = 0; i < n; i++) {\n"
        "  x += i;\n"
        "}\n"
        "for (j = 0; j < n; j++) {\n"
        "  x -= j;\n"
        "}"
    )
    assert extract_signals(code).max_nested_loops == 1


def test_line_that_opens_and_closes_counts_as_open_only() -> None:
    code = "for x in xs: end\nfor y in ys:\n  print(x, y)"
    assert extract_signals(code).max_nested_loops == 2


def test_nesting_is_clamped_at_zero() -> None:
    code = "}\n}\n}\nfor i in x:\n  print(i)"
    assert extract_signals(code).max_nested_loops == 1


def test_extra_closings_do_not_lower_recorded_maximum() -> None:
    code = "for a in x:\n for b in y:\n}\n}\n}\n}\nfor c in z:\n  print(c)"
    assert extract_signals(code).max_nested_loops == 2


def test_keywords_match_inside_longer_words() -> None:
    assert extract_signals("print(format(x))").max_nested_loops == 1
    assert closes_block("result.append(x)")


def test_do_block_opens_loop() -> None:
    assert opens_loop("do {")
    assert opens_loop("do{")
    assert not opens_loop("do")
    assert opens_loop("while (x < n) {")


def test_recursion_detected_through_self_call() -> None:
    code = "def fib(n):\n  if n<=1: return n\n  return fib(n-1)+fib(n-2)"
    assert extract_signals(code).has_recursion is True


def test_definition_line_counts_as_self_reference() -> None:
    code = "function add(a, b) {\n  return a + b;\n}"
    assert extract_signals(code).has_recursion is True


def test_no_recursion_when_name_is_never_followed_by_paren() -> None:
    code = "def fib (n):\n  return n"
    assert extract_signals(code).has_recursion is False


def test_name_lookup_uses_original_case_text() -> None:
    code = "def Fib(n):\n  return Fib(n-1)"
    assert extract_signals(code).has_recursion is False


def test_definition_requires_parentheses() -> None:
    assert not defines_function("def fib:")
    assert defines_function("func walk(n int) int {")
    assert function_name("func walk(n int) int {") == "walk"
    assert function_name("undefined function helper() {") == "helper"
    assert function_name("def (x)") is None


def test_single_line_can_add_several_tags() -> None:
    assert data_structure_tags("node_map = dict()") == ["hash", "tree"]
    assert data_structure_tags("items = []") == ["array"]


def test_tags_collapse_and_keep_first_seen_order() -> None:
    code = "seen = {}  # hash\nqueue = list()\ngraph = load()\ntree = build()\nlookup = dict()"
    assert extract_signals(code).data_structures == ("hash", "array", "tree")


def test_graph_and_tree_share_one_tag() -> None:
    code = "visit the graph\nwalk the tree"
    assert extract_signals(code).data_structures == ("tree",)


def test_language_hint_does_not_change_signals() -> None:
    code = "while queue:\n  for item in queue:\n    process(item)"
    assert extract_signals(code, "python") == extract_signals(code, "javascript")
