from project_publish.ignore.matcher import PathFilter, deciding_rule, is_ignored
from project_publish.ignore.models import Rule, RuleSet
from project_publish.ignore.parser import (
    load,
    load_rule_set,
    parse_rule_line,
    parse_rules,
    read_rule_file,
)

__all__ = [
    "PathFilter",
    "Rule",
    "RuleSet",
    "deciding_rule",
    "is_ignored",
    "load",
    "load_rule_set",
    "parse_rule_line",
    "parse_rules",
    "read_rule_file",
]
