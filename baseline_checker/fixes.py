"""
Illustrative auto-fixes for script sources.

Only two textual substitutions exist; anything smarter would need a parser.
"""

import re
from dataclasses import dataclass, field
from typing import List

FIXABLE_LANGUAGES = ('javascript', 'typescript')

_ARRAY_AT_PATTERN = re.compile(r"\b(\w+)\.at\((-?\d+)\)")
# Skip calls that are already the right-hand side of a guard from a previous run.
_SHOW_MODAL_PATTERN = re.compile(r"(?<!\? )\b(\w+)\.showModal\(\)")


@dataclass
class FixResult:
    text: str
    applied: List[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.applied)


def _replace_array_at(match: "re.Match") -> str:
    name, index = match.group(1), match.group(2)
    if index != "-1":
        return match.group(0)
    return f"{name}[{name}.length - 1]"


def _guard_show_modal(match: "re.Match") -> str:
    name = match.group(1)
    return f'{name}.showModal ? {name}.showModal() : ({name}.style.display = "block")'


def apply_fixes(text: str, language: str = 'javascript') -> FixResult:
    """Rewrite `x.at(-1)` to index access and guard `x.showModal()` calls."""
    result = FixResult(text=text)
    if language.lower() not in FIXABLE_LANGUAGES:
        return result

    fixed = _ARRAY_AT_PATTERN.sub(_replace_array_at, result.text)
    if fixed != result.text:
        result.applied.append("array-at")
        result.text = fixed

    fixed = _SHOW_MODAL_PATTERN.sub(_guard_show_modal, result.text)
    if fixed != result.text:
        result.applied.append("dialog")
        result.text = fixed

    return result
