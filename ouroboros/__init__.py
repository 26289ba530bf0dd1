"""Lexer, syntax tree, constant folding and string-valued operators for the Ouroboros scripting language, with small runtime helpers."""

__version__ = "0.1.0"