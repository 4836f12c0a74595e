from scss_dts.generator.renderer import DeclarationRenderer
from scss_dts.generator.templates import DEFAULT_TEMPLATE, ts_key

__all__ = ["DeclarationRenderer", "DEFAULT_TEMPLATE", "ts_key"]
