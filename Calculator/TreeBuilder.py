# TreeBuilder.py
"""
Groups a token list into an expression tree.

The builder works on half-open index ranges [start, end) of one token list,
never on copies, and repeats three steps per range:

1) Unwrap: strip a pair of parentheses while it encloses the whole range.
2) Split: pick the operator the range splits at. Shallower nesting wins;
   at equal nesting the operator binding loosest wins, and among equally
   loose operators the rightmost one. This gives left-to-right evaluation
   for operators of the same level, including '^'.
3) Recurse into the tokens left and right of the split point. The left
   part splits again at the next loosest operator to the left, so a chain
   of them is built in one loop over its operands.

A '+' or '-' in prefix position (start of a range, or right after an
operator or '(') is a sign, never a split point: '-x' becomes 0 - x.

Malformed input raises ParseError (LexError for unknown characters).
"""

from . import error as E
from .ExpressionTree import BinaryOp, Operator, Value
from .Tokenizer import TokenKind

SIGNS = ("+", "-")


def check_tokens(tokens):
    """Reject Error tokens and unbalanced parentheses before building."""
    if not tokens:
        raise E.ParseError(E.message("2000"), code="2000")

    open_parens = []
    for token in tokens:
        if token.kind == TokenKind.ERROR:
            raise E.LexError(
                E.message("1000", f"{token.text!r} at position {token.position}"), code="1000")
        elif token.kind == TokenKind.LEFT_PAREN:
            open_parens.append(token)
        elif token.kind == TokenKind.RIGHT_PAREN:
            if not open_parens:
                raise E.ParseError(E.message("2002", str(token.position)), code="2002")
            open_parens.pop()

    if open_parens:
        raise E.ParseError(E.message("2001", str(open_parens[-1].position)), code="2001")


def matching_paren(tokens, start, end):
    """Return the index of the ')' closing the '(' at tokens[start], or -1."""
    nesting = 0
    for i in range(start, end):
        kind = tokens[i].kind
        if kind == TokenKind.LEFT_PAREN:
            nesting += 1
        elif kind == TokenKind.RIGHT_PAREN:
            nesting -= 1
            if nesting == 0:
                return i
    return -1


def unwrap_parens(tokens, start, end):
    """Narrow [start, end) while its first '(' is closed by its last token."""
    while end - start >= 2 and tokens[start].kind == TokenKind.LEFT_PAREN:
        if matching_paren(tokens, start, end) != end - 1:
            break
        start += 1
        end -= 1
    return start, end


def is_sign(tokens, index, start):
    """True if the operator at index is a prefix sign rather than a binary operator."""
    if tokens[index].text not in SIGNS:
        return False
    if index == start:
        return True
    return tokens[index - 1].kind in (TokenKind.OPERATOR, TokenKind.LEFT_PAREN)


def find_splits(tokens, start, end):
    """Return the split points of [start, end) as a left-to-right list of (index, operator).

    Only binary operators outside parentheses count, and of those only the
    ones binding loosest. Splitting at the last of them and repeating on the
    left part visits exactly this list from right to left, so the list is
    the whole left spine of the subtree. Empty when the range has no binary
    operator outside parentheses.
    """
    splits = []
    loosest = -1
    nesting = 0

    for i in range(start, end):
        token = tokens[i]

        if token.kind == TokenKind.LEFT_PAREN:
            nesting += 1
        elif token.kind == TokenKind.RIGHT_PAREN:
            nesting -= 1
        elif token.kind == TokenKind.OPERATOR and nesting == 0:
            if is_sign(tokens, i, start):
                continue
            oper = Operator.from_symbol(token.text)
            if oper.binding_level > loosest:
                loosest = oper.binding_level
                splits = []
            if oper.binding_level == loosest:
                splits.append((i, oper))

    return splits


def parse_number(token):
    """Leaf: the single token of a range must be a Number."""
    if token.kind != TokenKind.NUMBER:
        if token.kind == TokenKind.OPERATOR:
            raise E.ParseError(E.message("2003", str(token.position)), code="2003")
        raise E.ParseError(
            E.message("2005", f"{token.text!r} at position {token.position}"), code="2005")
    try:
        return Value(int(token.text))
    except ValueError:
        raise E.ParseError(E.message("2006", repr(token.text)), code="2006") from None


def build(tokens, start, end):
    """Build the subtree for tokens[start:end]."""
    if start >= end:
        # Empty operand: "1 + ", "()", "* 2"
        position = tokens[start - 1].position if start > 0 else 0
        raise E.ParseError(E.message("2003", str(position)), code="2003")

    if end - start == 1:
        return parse_number(tokens[start])

    start, end = unwrap_parens(tokens, start, end)
    if end - start < 2:
        return build(tokens, start, end)

    splits = find_splits(tokens, start, end)

    if splits:
        # Left spine built in a loop: "1 + 1 + ... + 1" needs no recursion per term
        node = build(tokens, start, splits[0][0])
        for n, (split_at, oper) in enumerate(splits):
            operand_end = splits[n + 1][0] if n + 1 < len(splits) else end
            node = BinaryOp(oper, node, build(tokens, split_at + 1, operand_end))
        return node

    # No operator at the top level: either a signed operand or two operands in a row
    if tokens[start].kind == TokenKind.OPERATOR and is_sign(tokens, start, start):
        operand = build(tokens, start + 1, end)
        if tokens[start].text == "-":
            return BinaryOp(Operator.SUBTRACTION, Value(0), operand)
        return operand

    last = tokens[end - 1]
    raise E.ParseError(
        E.message("2004", f"{last.text!r} at position {last.position}"), code="2004")


def group_tokens(tokens):
    """Return the root of the expression tree for a complete token list."""
    tokens = list(tokens)
    check_tokens(tokens)
    try:
        root = build(tokens, 0, len(tokens))
    except RecursionError:
        raise E.ParseError(E.message("2007"), code="2007") from None
    return root
