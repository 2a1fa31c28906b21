from Calculator.Tokenizer import Token, TokenKind, iter_tokens, tokenize


def kinds(line):
    return [token.kind for token in tokenize(line)]


def texts(line):
    return [token.text for token in tokenize(line)]


def test_number_groups_contiguous_digits():
    assert tokenize("1234") == [Token(TokenKind.NUMBER, "1234", 0)]


def test_spaces_are_skipped():
    assert texts("  12 +  3 ") == ["12", "+", "3"]


def test_operators_and_parens():
    assert kinds("(1^2)*3/4+5-6") == [
        TokenKind.LEFT_PAREN, TokenKind.NUMBER, TokenKind.OPERATOR, TokenKind.NUMBER,
        TokenKind.RIGHT_PAREN, TokenKind.OPERATOR, TokenKind.NUMBER, TokenKind.OPERATOR,
        TokenKind.NUMBER, TokenKind.OPERATOR, TokenKind.NUMBER, TokenKind.OPERATOR,
        TokenKind.NUMBER,
    ]


def test_leading_minus_is_an_operator():
    assert tokenize("-7") == [
        Token(TokenKind.OPERATOR, "-", 0),
        Token(TokenKind.NUMBER, "7", 1),
    ]


def test_unknown_characters_become_error_tokens():
    tokens = tokenize("1 ? 2.5")
    assert [t.kind for t in tokens] == [
        TokenKind.NUMBER, TokenKind.ERROR, TokenKind.NUMBER, TokenKind.ERROR, TokenKind.NUMBER,
    ]
    assert tokens[1].text == "?"
    assert tokens[3].text == "."


def test_tab_is_not_whitespace():
    assert kinds("1\t2") == [TokenKind.NUMBER, TokenKind.ERROR, TokenKind.NUMBER]


def test_texts_reconstitute_line_without_spaces():
    line = " (12 + 3) * 45 - x"
    assert "".join(texts(line)) == line.replace(" ", "")


def test_positions_point_into_line():
    line = "10 + (22)"
    for token in tokenize(line):
        assert line[token.position:token.position + len(token.text)] == token.text


def test_empty_line():
    assert tokenize("") == []


def test_iter_tokens_is_lazy():
    stream = iter_tokens("1+2")
    assert next(stream).text == "1"
    assert next(stream).text == "+"
    assert next(stream).text == "2"
    assert next(stream, None) is None
