"""Expander, tokenizer, flagger and syntax checker for shell command lines."""

__version__ = "0.1.0"
__all__ = ["libft", "words", "lexer", "parser", "syntax", "expand"]