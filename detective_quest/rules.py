"""Clue classification: which suspect a clue points at."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml

logger = logging.getLogger(__name__)

DEFAULT_RULES_FILE = Path(__file__).parent / "inputs" / "suspects.yaml"

# Cache for loaded rule sets (keyed by file path)
_RULES_CACHE: Dict[str, "RuleBook"] = {}


@dataclass(frozen=True)
class SuspectRule:
    """A suspect and the keywords that implicate them."""
    suspect: str
    keywords: Tuple[str, ...]

    def matches(self, clue: str) -> bool:
        return any(keyword in clue for keyword in self.keywords)


@dataclass(frozen=True)
class RuleBook:
    """Ordered suspect rules plus the catch-all suspect."""
    rules: Tuple[SuspectRule, ...]
    unknown: str

    def classify(self, clue: str) -> str:
        """Return the first suspect whose keywords appear in the clue."""
        for rule in self.rules:
            if rule.matches(clue):
                return rule.suspect
        return self.unknown

    @property
    def roster(self) -> List[str]:
        return [rule.suspect for rule in self.rules]


def load_rules(rules_file: Optional[str] = None) -> RuleBook:
    """Load suspect rules from YAML (cached per file)."""
    path = str(rules_file or DEFAULT_RULES_FILE)
    if path in _RULES_CACHE:
        return _RULES_CACHE[path]

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.error(f"Suspect rules file not found: {path}")
        raise

    if not isinstance(data, dict):
        raise ValueError(f"Suspect rules must be a mapping, got {type(data).__name__} in {path}")

    entries = data.get("suspects", [])
    if not entries:
        raise ValueError(f"No suspects defined in {path}")
    if not isinstance(entries, list):
        raise ValueError(f"'suspects' must be a list in {path}")

    rules = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise ValueError(f"Suspect entry must be a mapping: {entry!r}")
        name = entry.get("name")
        keywords = entry.get("keywords") or []
        if not name or not keywords:
            raise ValueError(f"Suspect entry needs a name and keywords: {entry}")
        rules.append(SuspectRule(suspect=name, keywords=tuple(str(k) for k in keywords)))

    book = RuleBook(rules=tuple(rules), unknown=data.get("unknown", "Desconhecido"))
    _RULES_CACHE[path] = book
    logger.debug(f"Loaded {len(book.rules)} suspect rules from {path}")
    return book


def classify(clue: str) -> str:
    """Suspect implicated by a clue, using the packaged rules."""
    return load_rules().classify(clue)


def suspect_roster() -> List[str]:
    """Suspects that can be accused, in display order."""
    return load_rules().roster
