from typegen.generators.generator import (
    build_generated_file,
    generate_code,
    generate_from_text,
    resolve_options,
)
from typegen.generators.options import TargetLanguage, get_default_options, options_for
from typegen.generators.registry import registry
from typegen.generators.writer import write_files
