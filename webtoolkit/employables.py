"""
# Web Toolkit: employables.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Employable classes for markup replacements.
"""

import copy
import re
from typing import Callable, Optional

from webtoolkit.bases import Replacement
from webtoolkit.exceptions import CommittedMutateException, MissingAttributeException


class SubstitutionRule(Replacement):
    """
    A single (pattern, template) substitution rule.

    Every non-overlapping match of the pattern is replaced by the template,
    wherein positional placeholders `$«n»` or `${«n»}` are substituted by
    the text of capture group «n». A group that did not participate in the match
    (or does not exist in the pattern) substitutes the empty string.
    The captured text is inserted verbatim, i.e. without any escaping.
    """
    _PLACEHOLDER_PATTERN_COMPILED = re.compile(
        pattern=r'''
            [$]
            (?:
                (?P<bare_index> [0-9]{1,2} )
                    |
                [{] (?P<braced_index> [0-9]{1,2} ) [}]
            )
        ''',
        flags=re.ASCII | re.VERBOSE,
    )

    _pattern: Optional[str]
    _template: Optional[str]
    _flags: int
    _regex_pattern_compiled: Optional[re.Pattern]
    _substitute_function: Optional[Callable[[re.Match], str]]

    def __init__(self, id_: str, verbose_mode_enabled: bool = False):
        super().__init__(id_, verbose_mode_enabled)
        self._pattern = None
        self._template = None
        self._flags = re.DOTALL | re.VERBOSE
        self._regex_pattern_compiled = None
        self._substitute_function = None

    @property
    def pattern(self) -> Optional[str]:
        return self._pattern

    @pattern.setter
    def pattern(self, value: str):
        if self._is_committed:
            raise CommittedMutateException('error: cannot set `pattern` after `commit()`')

        self._pattern = value

    @property
    def template(self) -> Optional[str]:
        return self._template

    @template.setter
    def template(self, value: str):
        if self._is_committed:
            raise CommittedMutateException('error: cannot set `template` after `commit()`')

        self._template = value

    @property
    def flags(self) -> int:
        return self._flags

    @flags.setter
    def flags(self, value: int):
        if self._is_committed:
            raise CommittedMutateException('error: cannot set `flags` after `commit()`')

        self._flags = value

    def _validate_mandatory_attributes(self):
        if self._pattern is None:
            raise MissingAttributeException('pattern')

        if self._template is None:
            raise MissingAttributeException('template')

    def _set_apply_method_variables(self):
        self._regex_pattern_compiled = re.compile(pattern=self._pattern, flags=self._flags)
        self._substitute_function = self.build_substitute_function(self._template, self._regex_pattern_compiled.groups)

    def _apply(self, string: str) -> str:
        return re.sub(
            pattern=self._regex_pattern_compiled,
            repl=self._substitute_function,
            string=string,
        )

    @staticmethod
    def extract_template_pieces(template: str) -> list[tuple[str, Optional[int]]]:
        """
        Split a template into (literal text, group index) pieces.

        The final piece has a group index of None.
        """
        pieces = []
        literal_start = 0
        for placeholder_match in SubstitutionRule._PLACEHOLDER_PATTERN_COMPILED.finditer(template):
            index_string = placeholder_match.group('bare_index') or placeholder_match.group('braced_index')
            pieces.append((template[literal_start:placeholder_match.start()], int(index_string)))
            literal_start = placeholder_match.end()

        pieces.append((template[literal_start:], None))

        return pieces

    @staticmethod
    def build_substitute_function(template: str, group_count: int) -> Callable[[re.Match], str]:
        pieces = SubstitutionRule.extract_template_pieces(template)

        def substitute_function(match: re.Match) -> str:
            substitute_parts = []
            for literal, group_index in pieces:
                substitute_parts.append(literal)
                if group_index is not None and group_index <= group_count:
                    substitute_parts.append(match.group(group_index) or '')

            return ''.join(substitute_parts)

        return substitute_function


class RuleSet(Replacement):
    """
    An ordered sequence of substitution rules.

    Each rule is applied to the whole output of the rule before it
    (rather than all rules being merged into a single pass).
    Once committed, the rule set is immutable and safe to share.
    """
    _rules: list['SubstitutionRule']

    def __init__(self, id_: str, verbose_mode_enabled: bool = False):
        super().__init__(id_, verbose_mode_enabled)
        self._rules = []

    @property
    def rules(self) -> tuple['SubstitutionRule', ...]:
        return tuple(self._rules)

    def add_rule(self, rule: 'SubstitutionRule'):
        if self._is_committed:
            raise CommittedMutateException('error: cannot call `add_rule(...)` after `commit()`')

        self._rules.append(rule)

    def _validate_mandatory_attributes(self):
        pass

    def _set_apply_method_variables(self):
        self._rules = copy.copy(self._rules)
        for rule in self._rules:
            if not rule.is_committed:
                rule.commit()

    def _apply(self, string: str) -> str:
        for rule in self._rules:
            string = rule.apply(string)

        return string
