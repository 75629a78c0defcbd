"""
Rewrites over GNFA edge labels.

Labels are plain regex strings. The empty string is epsilon, so it is the
identity of concatenation and its own Kleene star. Operands are wrapped in
parentheses conservatively; no attempt is made to minimise the result.
"""

EPSILON = ''


def has_top_level_alternation(regex: str) -> bool:
    """Check whether ``regex`` contains a '|' outside of any parentheses."""
    depth = 0
    for char in regex:
        if char == '(':
            depth += 1
        elif char == ')':
            depth -= 1
        elif char == '|' and depth == 0:
            return True
    return False


def group(regex: str) -> str:
    """Parenthesise ``regex`` if concatenating it could change its meaning."""
    if has_top_level_alternation(regex):
        return f"({regex})"
    return regex


def concat(left: str, right: str) -> str:
    """Concatenate two labels, with epsilon as the identity."""
    if left == EPSILON:
        return right
    if right == EPSILON:
        return left
    return group(left) + group(right)


def alt(left: str, right: str) -> str:
    """Alternation of two labels. An epsilon operand is written as ``()``."""
    return f"({left})|({right})"


def merge(existing: str, new: str) -> str:
    """
    Combine the labels of two parallel edges.

    Two epsilon edges stay a single epsilon edge; everything else becomes an
    alternation.
    """
    if existing == EPSILON and new == EPSILON:
        return EPSILON
    return alt(existing, new)


def star(regex: str) -> str:
    """Kleene star of a label. Epsilon* is epsilon."""
    if regex == EPSILON:
        return EPSILON
    return f"({regex})*"
