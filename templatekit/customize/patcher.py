"""Apply replacement rules to template files in place."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from pathlib import Path

from templatekit.customize.replacements import ReplacementRule
from templatekit.utils import display_path, print_info, print_success, print_warning


def apply_replacements(content: str, rules: Sequence[ReplacementRule]) -> tuple[str, bool]:
    """Apply *rules* to *content*.

    Every occurrence of a rule's source is replaced. The pattern is built
    from the escaped literal so regex metacharacters in the source never
    take effect, and the target is inserted verbatim.

    Returns:
        ``(new_content, matched)`` where *matched* is ``True`` if any rule's
        source was present.
    """
    matched = False
    for rule in rules:
        if rule.source in content:
            pattern = re.compile(re.escape(rule.source))
            content = pattern.sub(lambda _m, target=rule.target: target, content)
            matched = True
    return content, matched


def update_file(path: Path, rules: Sequence[ReplacementRule], root: Path | None = None) -> bool:
    """Apply *rules* to the file at *path* and write it back if anything matched.

    Never raises for a missing file: a warning is printed and ``False`` is
    returned. The return value is ``True`` only when the file was written.
    """
    label = display_path(path, root) if root else str(path)

    if not path.is_file():
        print_warning(f"File not found: {label}")
        return False

    content = path.read_text(encoding="utf-8")
    new_content, matched = apply_replacements(content, rules)

    if not matched:
        print_info(f"No changes needed: {label}")
        return False

    path.write_text(new_content, encoding="utf-8")
    print_success(f"Updated: {label}")
    return True


def update_files(root: Path, files: Iterable[str], rules: Sequence[ReplacementRule]) -> int:
    """Run :func:`update_file` over *files* (relative to *root*); return the update count."""
    return sum(1 for rel in files if update_file(root / rel, rules, root=root))
