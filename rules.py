"""Text cleanup rules applied before tokenization.

A rule is a regex plus a replacement (constant string or a function of the
match). The same rule has to be used when the index is built and when it is
queried, otherwise query terms will not line up with the vocabulary.
"""
import re
from dataclasses import dataclass, field
from typing import Callable, Union

Replacement = Union[str, Callable[[re.Match], str]]


@dataclass(frozen=True)
class NormalizationRule:
    pattern: re.Pattern
    replacement: Replacement = " "
    name: str = field(default="custom", compare=False)

    def __post_init__(self):
        if isinstance(self.pattern, str):
            object.__setattr__(self, "pattern", re.compile(self.pattern))

    def apply(self, text: str) -> str:
        replacement = self.replacement
        if isinstance(replacement, str):
            # constant separator, inserted literally rather than as a template
            return self.pattern.sub(lambda _match: replacement, text)
        return self.pattern.sub(replacement, text)


def _dimensions_replacement(match: re.Match) -> str:
    # "10mm" -> "10 mm", "x" and "." -> separator
    if match.group(2):
        return f"{match.group(3)} {match.group(4)}"
    return " "


PUNCTUATION_RULE = NormalizationRule(re.compile(r"[^\w\s]"), "", name="punctuation")
SEPARATOR_RULE = NormalizationRule(re.compile(r"[^A-Za-z0-9]"), " ", name="separator")
DIMENSIONS_RULE = NormalizationRule(
    re.compile(r"(x|\.)|((\d+)(mm))|([^A-Za-z0-9])"),
    _dimensions_replacement,
    name="dimensions",
)

_RULES = {
    rule.name: rule
    for rule in (PUNCTUATION_RULE, SEPARATOR_RULE, DIMENSIONS_RULE)
}


def get_rule(name: str) -> NormalizationRule:
    """Return a named rule, raising ValueError for unknown names."""
    try:
        return _RULES[name]
    except KeyError as exc:
        raise ValueError(
            f"Unknown normalization rule '{name}'. Available: {', '.join(sorted(_RULES))}"
        ) from exc


def available_rules() -> list[str]:
    return sorted(_RULES)
