"""
Example snippets keyed by language.

Used to pre-fill an input box; the analyzer itself ignores the language.
"""

DEFAULT_EXAMPLE_LANGUAGE = "pseudocode"

EXAMPLES: dict[str, str] = {
    "python": """def binary_search(arr, target):
    left, right = 0, len(arr) - 1
    while left <= right:
        mid = (left + right) // 2
        if arr[mid] == target:
            return mid
        elif arr[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return -1""",
    # Blank lines keep their indentation.
    "javascript": "\n".join([
        "function fibonacci(n) {",
        "    if (n <= 1) return n;",
        "    ",
        "    let prev = 0, curr = 1;",
        "    for (let i = 2; i <= n; i++) {",
        "        let next = prev + curr;",
        "        prev = curr;",
        "        curr = next;",
        "    }",
        "    return curr;",
        "}",
    ]),
    "pseudocode": "\n".join([
        "for i = 0 to n-1:",
        "    for j = 0 to n-1:",
        "        print(i, j)",
        "        ",
        "for k = 0 to n-1:",
        "    print(k)",
    ]),
}


def get_example(language: str) -> str:
    """Snippet for ``language``, falling back to pseudocode."""
    return EXAMPLES.get(language.strip().lower(), EXAMPLES[DEFAULT_EXAMPLE_LANGUAGE])
