# MathEngine.py
"""""
Core calculation engine for the integer calculator.

Pipeline
--------
1) Tokenizer: converts a raw input line into a flat list of tokens.
2) Tree builder: groups the tokens into an expression tree (precedence by split point).
3) Evaluator: computes the integer value of the tree.

Every call is independent; nothing is kept between calls.
"""""

import logging

from . import error as E
from . import Tokenizer
from . import TreeBuilder

logger = logging.getLogger(__name__)


def evaluate(line):
    """Main API: tokenize → group → evaluate. Returns an int.

    Raises:
        ParseError (LexError included) for malformed input,
        ArithmeticError for division by zero and out-of-range powers.
    """
    try:
        tokens = Tokenizer.tokenize(line)
        logger.debug("Tokens: %s", [token.text for token in tokens])

        tree = TreeBuilder.group_tokens(tokens)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Tree: %s", tree.to_infix())

        return tree.evaluate()

    # Re-raise our domain errors after attaching the source equation
    except E.MathError as e:
        e.equation = line
        raise
    except RecursionError:
        raise E.ParseError(E.message("2007"), code="2007", equation=line) from None
    # Convert unexpected Python exceptions to our unified error type
    except Exception as e:
        raise E.MathError(
            message=E.message("9999", str(e).strip()),
            code="9999",
            equation=line
        ) from e


def calculate(line):
    """Evaluate line and render the result for display, e.g. '= 7'."""
    return f"= {evaluate(line)}"
