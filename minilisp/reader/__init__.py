from minilisp.reader.cursor import Cursor
from minilisp.reader.lexer import Token, LPAREN, RPAREN, lex, tokenize

__all__ = ["Cursor", "Token", "LPAREN", "RPAREN", "lex", "tokenize"]
