#!/usr/bin/env python3
"""
Validate three-layer architecture dependencies of the workboard package.

Rules:
- core imports nothing from c1/c2/c3
- c1 imports from core only (plus stdlib + external)
- c2 imports from c1 and core
- c3 imports from c2, c1, other c3 packages and core
"""

import ast
import sys
from pathlib import Path
from typing import List, Optional, Tuple

PACKAGE = "workboard"
PACKAGE_DIR = Path(__file__).resolve().parent.parent / PACKAGE

FORBIDDEN_IMPORTS = {
    "core": {"c1", "c2", "c3"},
    "c1": {"c2", "c3"},
    "c2": {"c3"},
    "c3": set(),
}


def extract_imports(file_path: Path) -> List[str]:
    """Extract all workboard imports from a Python file."""
    try:
        tree = ast.parse(file_path.read_text(), filename=str(file_path))
    except SyntaxError as e:
        print(f"⚠️  Syntax error in {file_path}: {e}")
        return []

    imports = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                if alias.name.startswith(f"{PACKAGE}."):
                    imports.append(alias.name)
        elif isinstance(node, ast.ImportFrom):
            if node.module and node.module.startswith(f"{PACKAGE}."):
                imports.append(node.module)

    return imports


def get_layer(package_name: str) -> Optional[str]:
    """Get layer from a top-level subpackage name (c1_*, c2_*, c3_*, core)."""
    if package_name.startswith("c1_"):
        return "c1"
    elif package_name.startswith("c2_"):
        return "c2"
    elif package_name.startswith("c3_"):
        return "c3"
    elif package_name == "core":
        return "core"
    return None


def validate_layer_dependencies(package_dir: Path = PACKAGE_DIR) -> Tuple[bool, List[str]]:
    """Validate that layer dependencies follow the rules."""
    violations = []

    if not package_dir.exists():
        return False, [f"Package directory not found: {package_dir}"]

    for py_file in sorted(package_dir.rglob("*.py")):
        package_parts = py_file.relative_to(package_dir).parts
        if len(package_parts) < 2:
            # Top-level modules such as __init__.py sit outside the layers
            continue

        file_layer = get_layer(package_parts[0])
        if file_layer is None:
            continue

        for imported_module in extract_imports(py_file):
            parts = imported_module.split(".")
            imported_layer = get_layer(parts[1]) if len(parts) > 1 else None
            if imported_layer in FORBIDDEN_IMPORTS[file_layer]:
                violations.append(
                    f"{py_file.relative_to(package_dir.parent)}: "
                    f"{file_layer} cannot import from {imported_layer} ({imported_module})"
                )

    return len(violations) == 0, violations


def main():
    """Run architecture validation."""
    print("=" * 70)
    print("Three-Layer Architecture Validator")
    print("=" * 70)
    print()

    success, violations = validate_layer_dependencies()

    if success:
        print("✅ All layer dependencies are valid!")
        print()
        print("Layer rules:")
        print("  - core imports: stdlib + external packages only")
        print("  - c1 imports: core + stdlib + external packages")
        print("  - c2 imports: c1 + core + stdlib + external packages")
        print("  - c3 imports: c1 + c2 + c3 + core + stdlib + external packages")
        return 0
    else:
        print(f"❌ Found {len(violations)} layer dependency violations:")
        print()
        for violation in violations:
            print(f"  - {violation}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
