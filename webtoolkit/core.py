"""
# Web Toolkit: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Core BBCode-to-HTML conversion.

The following tags are recognised, each by a fixed rule applied in this order:
````
[img]«http(s) url ending in jpg|jpeg|gif|png|bmp»[/img]
[quote]«content»[/quote]
[b]«content»[/b]
[size=«n»]«content»[/size]
[i]«content»[/i]
[url]«ftp|http|https url»[/url]
[u]«content»[/u]
[color=«c»]«content»[/color]
````
Each rule runs over the whole output of the previous rule,
with lazy, non-recursive matching (so nested same-name tags are not paired up).
Unmatched or malformed tags are left as they are.

Captured content is NOT escaped. If the input is untrusted,
the output must be sanitised before being embedded in an HTML document.
"""

from webtoolkit.constants import BBCODE_RULES
from webtoolkit.employables import RuleSet, SubstitutionRule


def build_bbcode_rule_set(verbose_mode_enabled: bool = False) -> RuleSet:
    rule_set = RuleSet('bbcode', verbose_mode_enabled)
    for id_, pattern, template in BBCODE_RULES:
        rule = SubstitutionRule(id_, verbose_mode_enabled)
        rule.pattern = pattern
        rule.template = template
        rule_set.add_rule(rule)

    rule_set.commit()

    return rule_set


BBCODE_RULE_SET = build_bbcode_rule_set()


def bbcode_to_html(content: str, verbose_mode_enabled: bool = False) -> str:
    """
    Convert BBCode to HTML.
    """
    if verbose_mode_enabled:
        rule_set = build_bbcode_rule_set(verbose_mode_enabled=True)
    else:
        rule_set = BBCODE_RULE_SET

    return rule_set.apply(content)
