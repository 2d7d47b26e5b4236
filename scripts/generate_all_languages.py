"""Script to generate every target language for one sample and save the files for inspection."""
import json
import sys
from pathlib import Path

from typegen.generators import TargetLanguage, build_generated_file, generate_code, write_files

# Simple test sample
sample = {
    "id": 42,
    "user_name": "ada",
    "email": None,
    "active": True,
    "profile": {"age": 36, "tags": ["math", "engines"]},
    "orders": [{"sku": "A-1", "quantity": 2, "price": 9.5}],
    "notes": [],
}

if len(sys.argv) > 1:
    sample = json.loads(Path(sys.argv[1]).read_text(encoding="utf-8"))

# Use a persistent directory in the project
output_dir = Path(__file__).parent.parent / "test_output" / "all_languages"

files = []
for language in TargetLanguage:
    code = generate_code(sample, language, {"rootName": "User"})
    generated = build_generated_file(code, "User", language)
    if generated is None:
        print(f"[SKIP] {language.value}: nothing to generate")
        continue
    files.append(generated)

written = write_files(files, output_dir)

print("=" * 60)
print("GENERATED FILES")
print("=" * 60)
for path in written:
    lines = path.read_text(encoding="utf-8").count("\n") + 1
    print(f"[OK] {path.relative_to(output_dir)} ({lines} lines)")
print(f"\nFiles saved to: {output_dir}")
