"""scss-dts: generate TypeScript declarations for SCSS module class names."""
from __future__ import annotations

__version__ = "0.1.0"

from scss_dts.config import GeneratorConfig  # noqa: E402
from scss_dts.errors import InputError, LexicalError, RenderError, ScssDtsError  # noqa: E402
from scss_dts.extract import extract_class_names, ordered_class_names, resolve_nesting  # noqa: E402
from scss_dts.generator import DeclarationRenderer  # noqa: E402
from scss_dts.lexer import Scanner, Token, TokenKind, tokenize  # noqa: E402
from scss_dts.processor import generate_declarations, process_file, run_files  # noqa: E402

__all__ = [
    "__version__",
    "GeneratorConfig",
    "ScssDtsError",
    "InputError",
    "LexicalError",
    "RenderError",
    "Scanner",
    "Token",
    "TokenKind",
    "tokenize",
    "extract_class_names",
    "ordered_class_names",
    "resolve_nesting",
    "DeclarationRenderer",
    "process_file",
    "run_files",
    "generate_declarations",
]
