# error.py
import builtins


class MathError(Exception):
    def __init__(self, message, code="9999", equation=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation

    def __str__(self):
        return self.message


class ParseError(MathError):
    pass

class LexError(ParseError):
    pass

class ArithmeticError(MathError, builtins.ArithmeticError):
    pass



Error_Dictionary = {

    "1" : "Tokenizer Error",
    "2" : "Parser Error",
    "3" : "Calculation Error",
    "5" : "Configuration Error",
    "9" : "Runtime Error"

}

# Error codes are structured in:
# 1. Digit: Stage (see Error_Dictionary)
# 2. Digit: Specification
# 3. and 4. Digit: Error Number


ERROR_MESSAGES = {
    "1000" : "Unexpected character: ", # + character and position

    "2000" : "Empty expression.",
    "2001" : "Missing ')' for '(' at position ", # + position
    "2002" : "Missing '(' for ')' at position ", # + position
    "2003" : "Missing Number near position ", # + position
    "2004" : "Missing operator before ", # + Token and position
    "2005" : "Unexpected Token: ", # + Token
    "2006" : "Invalid number: ", # + literal
    "2007" : "Expression nested too deeply.",

    "3003" : "Division by Zero",
    "3026" : "Number too big.",
    "3027" : "Undefined power: ", # + base ^ exponent

    "5000" : "Settings could not be saved: ", # + OS error

    "9999" : "Unexpected Error: " #+error
}


def message(code, detail=""):
    """Return the table text for code followed by detail."""
    return ERROR_MESSAGES[code] + detail


def describe(code):
    """Return the stage name for an error code, e.g. '3003' -> 'Calculation Error'."""
    return Error_Dictionary.get(str(code)[:1], Error_Dictionary["9"])
