from scss_dts.lexer.cursor import Cursor
from scss_dts.lexer.scanner import Scanner, tokenize
from scss_dts.lexer.tokens import Operator, Token, TokenKind

__all__ = ["Cursor", "Scanner", "tokenize", "Operator", "Token", "TokenKind"]
