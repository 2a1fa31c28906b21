# Console.py
"""
Interactive read loop for the calculator.

Reads one expression per line, prints its integer value and prompts again.
Errors are reported and the loop continues; end of input ends the loop.
"""

import logging

from . import error as E
from . import config_manager as config_manager
from . import MathEngine as MathEngine

logger = logging.getLogger(__name__)


def format_error(error, show_code=True):
    """Render a MathError for the console, e.g. 'Error [3003]: Division by Zero'."""
    if show_code:
        return f"Error [{error.code}]: {error.message}"
    return f"Error: {error.message}"


def run(stdin, stdout, settings=None):
    """Run the read loop until stdin is exhausted. Returns the exit status."""
    if settings is None:
        settings = config_manager.load_setting_value("all")

    prompt = settings.get("prompt", ">> ")
    show_code = settings.get("show_error_codes", True)

    while True:
        stdout.write(prompt)
        stdout.flush()

        raw_line = stdin.readline()
        if not raw_line:
            stdout.write(f"{settings.get('quit_message', 'quitting...')}\n")
            return 0

        line = raw_line.rstrip("\r\n")
        if not line:
            continue

        try:
            result = MathEngine.evaluate(line)
        except E.MathError as e:
            logger.info("%s %s in %r: %s", E.describe(e.code), e.code, e.equation, e.message)
            stdout.write(format_error(e, show_code) + "\n")
            continue

        stdout.write(f"{result}\n")
