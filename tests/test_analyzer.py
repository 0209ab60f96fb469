from __future__ import annotations

import pytest

from core import HeuristicComplexityAnalyzer, analyze

TIME_LABELS = {"O(1)", "O(n)", "O(n²)", "O(n³)", "O(2^n)"}
SPACE_LABELS = {"O(1)", "O(n)"}

TRIPLE_LOOP = """for (let i = 0; i < n; i++) {
  for (let j = 0; j < n; j++) {
    for (let k = 0; k < n; k++) {
      sum += i * j * k;
    }
  }
}"""


def test_nested_python_loops_are_quadratic() -> None:
    result = analyze("for i in range(n):\n  for j in range(n):\n    print(i,j)")
    assert result.timeComplexity == "O(n²)"
    assert result.spaceComplexity == "O(1)"


def test_recursive_fibonacci_is_exponential() -> None:
    result = analyze("def fib(n):\n  if n<=1: return n\n  return fib(n-1)+fib(n-2)")
    assert result.timeComplexity == "O(2^n)"
    assert "• Recursive function calls detected" in result.detailedReport


def test_hash_map_without_loops() -> None:
    result = analyze("hash_map = {}")
    assert result.timeComplexity == "O(1)"
    assert result.spaceComplexity == "O(n)"
    assert result.spaceExplanation == "Linear space - hash map/dictionary detected."


def test_empty_input_is_constant() -> None:
    result = analyze("")
    assert result.timeComplexity == "O(1)"
    assert result.spaceComplexity == "O(1)"


def test_three_closed_loops_are_cubic() -> None:
    result = analyze(TRIPLE_LOOP)
    assert result.timeComplexity == "O(n³)"
    assert "Found 3 levels of nested loops" in result.detailedReport


def test_graph_and_tree_give_single_tree_tag() -> None:
    result = analyze("visit the graph\nwalk the tree")
    assert result.spaceComplexity == "O(n)"
    assert result.spaceExplanation == "Linear space - tree/graph data structure detected."
    assert "• Data structures used: tree\n" in result.detailedReport


def test_recursion_beats_cubic_nesting() -> None:
    code = "def walk(node):\n" + TRIPLE_LOOP.replace("sum += i * j * k;", "walk(node.children[k]);")
    assert analyze(code).timeComplexity == "O(2^n)"


@pytest.mark.parametrize(
    "code",
    [
        "",
        "hello world",
        "}}}} end end end",
        "do { do { do {",
        "(((((",
        "def\nfunction\nfunc",
        "ünïcödé → for ∀ x",
        "\r\n\r\n\t",
    ],
)
def test_every_input_gets_a_known_label(code: str) -> None:
    result = analyze(code)
    assert result.timeComplexity in TIME_LABELS
    assert result.spaceComplexity in SPACE_LABELS


def test_repeated_analysis_is_identical() -> None:
    first = analyze(TRIPLE_LOOP, "javascript")
    second = analyze(TRIPLE_LOOP, "javascript")
    assert first.model_dump_json() == second.model_dump_json()


def test_analyzer_normalizes_language_hint() -> None:
    assert HeuristicComplexityAnalyzer.normalize_language(" Python ") == "python"
    assert HeuristicComplexityAnalyzer.normalize_language("cobol") == "auto"
    assert HeuristicComplexityAnalyzer.normalize_language(None) == "auto"
    assert HeuristicComplexityAnalyzer("rust").default_language == "auto"


def test_analyzer_matches_module_function() -> None:
    analyzer = HeuristicComplexityAnalyzer()
    code = "while queue:\n  node = queue.pop()"
    assert analyzer.analyze(code, "python") == analyze(code)
