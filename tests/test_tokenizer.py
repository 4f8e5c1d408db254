"""Tests for cmdargs.tokenizer."""

from cmdargs.tokenizer import Token, TokenKind, build_delimiters, tokenize


def literals(message, delimiters=(" ",)):
    return [t.literal for t in tokenize(message, delimiters)]


def kinds(message, delimiters=(" ",)):
    return [t.kind for t in tokenize(message, delimiters)]


class TestBuildDelimiters:
    def test_only_present_delimiters_kept(self):
        assert build_delimiters("a;b", [" ", ";"]) == frozenset(";")

    def test_multichar_delimiter_exploded(self):
        assert build_delimiters("a, b", [", "]) == frozenset({",", " "})

    def test_multichar_delimiter_absent_contributes_nothing(self):
        # "," and " " both occur, but never as ", "
        assert build_delimiters("a ,b", [", "]) == frozenset()

    def test_empty_message(self):
        assert build_delimiters("", [" "]) == frozenset()


class TestTokenize:
    def test_basic_splitting(self):
        assert literals("hello world!") == ["hello", " ", "world!"]

    def test_kinds(self):
        assert kinds("a b") == [TokenKind.ARGUMENT, TokenKind.DELIMITER, TokenKind.ARGUMENT]

    def test_empty_string(self):
        assert tokenize("", [" "]) == []

    def test_no_delimiters_configured(self):
        assert literals("a b", ()) == ["a b"]

    def test_adjacent_delimiters(self):
        assert literals("a  b") == ["a", " ", " ", "b"]

    def test_delimiters_only(self):
        assert kinds("   ") == [TokenKind.DELIMITER] * 3

    def test_multichar_delimiter_splits_on_each_char(self):
        assert literals("a, b,c", [", "]) == ["a", ",", " ", "b", ",", "c"]

    def test_unused_delimiter_ignored(self):
        assert literals("a;b c", [";", "|"]) == ["a", ";", "b c"]

    def test_quoted_argument(self):
        tokens = tokenize('say "hello world" !', [" "])
        assert tokens[2] == Token(
            kind=TokenKind.QUOTED_ARGUMENT, literal='"hello world"', position=4, index=4
        )
        assert [t.literal for t in tokens] == ["say", " ", '"hello world"', " ", "!"]

    def test_quoted_argument_followed_by_text(self):
        assert kinds('"ab"cd') == [TokenKind.QUOTED_ARGUMENT, TokenKind.ARGUMENT]
        assert literals('"ab"cd') == ['"ab"', "cd"]

    def test_empty_quotes(self):
        tokens = tokenize('""', [" "])
        assert tokens == [Token(TokenKind.QUOTED_ARGUMENT, '""', 0, 0)]
        assert tokens[0].unquoted == ""

    def test_quote_mid_argument_is_plain_text(self):
        assert literals('a"b c"') == ['a"b', " ", 'c"']

    def test_unterminated_quote_runs_to_end(self):
        tokens = tokenize('"42 69', [" "])
        assert tokens == [Token(TokenKind.ARGUMENT, '"42 69', 0, 0)]

    def test_unterminated_quote_after_arguments(self):
        assert literals('a "b c') == ["a", " ", '"b c']
        assert kinds('a "b c')[-1] is TokenKind.ARGUMENT

    def test_lone_quote(self):
        assert tokenize('"', [" "]) == [Token(TokenKind.ARGUMENT, '"', 0, 0)]

    def test_quote_as_delimiter_wins(self):
        assert kinds('a"b', ['"']) == [TokenKind.ARGUMENT, TokenKind.DELIMITER, TokenKind.ARGUMENT]


class TestPositions:
    def test_ascii_positions(self):
        tokens = tokenize("42 69 91", [" "])
        assert [t.position for t in tokens] == [0, 2, 3, 5, 6]
        assert [t.index for t in tokens] == [0, 2, 3, 5, 6]

    def test_multibyte_positions_are_byte_offsets(self):
        tokens = tokenize("é ü", [" "])
        assert [t.position for t in tokens] == [0, 2, 3]
        assert [t.index for t in tokens] == [0, 1, 2]

    def test_multibyte_delimiter(self):
        assert literals("a→b→c", ["→"]) == ["a", "→", "b", "→", "c"]

    def test_literals_reconstruct_from_bytes(self):
        message = 'héllo→"wörld 🎉"→ünterminated "ß→x'
        encoded = message.encode("utf-8")
        tokens = tokenize(message, ["→", " "])
        for token in tokens:
            raw = token.literal.encode("utf-8")
            assert encoded[token.position : token.position + len(raw)] == raw
            assert message[token.index : token.index + len(token.literal)] == token.literal
        assert "".join(t.literal for t in tokens) == message


class TestTokenUnquoted:
    def test_plain_argument_unchanged(self):
        assert Token(TokenKind.ARGUMENT, '"x', 0, 0).unquoted == '"x'

    def test_quoted_argument_stripped(self):
        assert Token(TokenKind.QUOTED_ARGUMENT, '"x y"', 0, 0).unquoted == "x y"
