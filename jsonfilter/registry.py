import json, logging, typing as t
from dataclasses import dataclass
from pathlib import Path

import yaml

from .config import DEFAULT_SETTINGS, Settings
from .evaluation import check
from .filters import Filter, FilterError, parse_filter_json

log = logging.getLogger("jsonfilter.registry")


@dataclass
class RuleOutcome:
    """Result of evaluating one stored rule against a value."""

    rule: str
    matched: bool
    error: t.Optional[FilterError] = None


class RuleRegistry:
    """
    Named filters loaded from a YAML or JSON file shaped
    {"rules": {<name>: <filter>}}.
    """

    def __init__(self, path: t.Union[str, Path, None] = None, settings: t.Optional[Settings] = None):
        self.settings = settings if settings is not None else DEFAULT_SETTINGS
        self.path = Path(path) if path is not None else self.settings.rules_file
        self.rules: dict[str, Filter] = {}

    def load(self) -> None:
        if not self.path.exists():
            raise RuntimeError(f"Rules file not found: {self.path}")
        with self.path.open("r", encoding="utf-8") as f:
            if self.path.suffix.lower() in (".yaml", ".yml"):
                cfg = yaml.safe_load(f)
            else:
                cfg = json.load(f)
        rules = cfg.get("rules") if isinstance(cfg, dict) else None
        if not isinstance(rules, dict):
            raise RuntimeError(f"Bad rules file {self.path}: expected a 'rules' mapping")
        parsed: dict[str, Filter] = {}
        for name, raw in rules.items():
            try:
                parsed[str(name)] = parse_filter_json(raw, validate=self.settings.validate_schema)
            except Exception as e:
                raise RuntimeError(f"Bad rule {name} in {self.path}: {e}") from e
        self.rules = parsed
        log.info("loaded %d rule(s) from %s", len(parsed), self.path)

    def names(self) -> list[str]:
        return list(self.rules)

    def get(self, name: str) -> Filter:
        if name not in self.rules:
            raise KeyError(f"Unknown rule: {name}")
        return self.rules[name]

    def check(self, name: str, value: t.Any) -> bool:
        return check(self.get(name), value, settings=self.settings)

    def evaluate(self, value: t.Any) -> dict[str, RuleOutcome]:
        """Run every rule; a rule that cannot be evaluated is recorded, not skipped."""
        outcomes: dict[str, RuleOutcome] = {}
        for name, flt in self.rules.items():
            try:
                outcomes[name] = RuleOutcome(name, check(flt, value, settings=self.settings))
            except FilterError as e:
                log.warning("rule %s could not be evaluated: %s", name, e)
                outcomes[name] = RuleOutcome(name, False, e)
        return outcomes

    def matching(self, value: t.Any) -> list[str]:
        return [name for name, o in self.evaluate(value).items() if o.matched and o.error is None]
