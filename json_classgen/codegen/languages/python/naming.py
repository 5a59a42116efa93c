"""
Python-specific naming checks.

Keys are emitted verbatim as attribute and ``__init__`` parameter names;
these sets only drive warnings.
"""

# Python reserved keywords
PYTHON_RESERVED_WORDS = frozenset(
    {
        "False",
        "None",
        "True",
        "and",
        "as",
        "assert",
        "async",
        "await",
        "break",
        "class",
        "continue",
        "def",
        "del",
        "elif",
        "else",
        "except",
        "finally",
        "for",
        "from",
        "global",
        "if",
        "import",
        "in",
        "is",
        "lambda",
        "nonlocal",
        "not",
        "or",
        "pass",
        "raise",
        "return",
        "try",
        "while",
        "with",
        "yield",
    }
)

# Names the generated __init__ already binds
PYTHON_INIT_NAMES = frozenset({"self"})
