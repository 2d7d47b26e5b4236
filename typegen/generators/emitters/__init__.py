"""Per-language emitters: ``emit(root, options) -> str``."""
