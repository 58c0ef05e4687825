"""
# Web Toolkit: bases.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Base class for markup replacements.
"""

import abc

from webtoolkit.constants import VERBOSE_MODE_DIVIDER_SYMBOL_COUNT
from webtoolkit.exceptions import UncommittedApplyException


class Replacement(abc.ABC):
    """
    Base class for a replacement applied to a string.

    A replacement is configured, then frozen by calling `commit()`.
    Once committed it may be applied any number of times (and shared freely),
    but no longer mutated.
    """
    _is_committed: bool
    _id: str
    _verbose_mode_enabled: bool

    def __init__(self, id_: str, verbose_mode_enabled: bool = False):
        self._is_committed = False
        self._id = id_
        self._verbose_mode_enabled = verbose_mode_enabled

    @property
    def id_(self) -> str:
        return self._id

    @property
    def is_committed(self) -> bool:
        return self._is_committed

    def commit(self):
        self._validate_mandatory_attributes()
        self._set_apply_method_variables()
        self._is_committed = True

    def apply(self, string: str) -> str:
        if not self._is_committed:
            raise UncommittedApplyException('error: cannot call `apply(string)` before `commit()`')

        string_before = string
        string = self._apply(string)
        string_after = string

        if self._verbose_mode_enabled:
            if string_before == string_after:
                no_change_indicator = ' (no change)'
            else:
                no_change_indicator = ''

            print('<' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' BEFORE #{self._id}')
            print(string_before)
            print('=' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + no_change_indicator)
            print(string_after)
            print('>' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' AFTER #{self._id}')
            print('\n\n\n\n')

        return string_after

    @abc.abstractmethod
    def _validate_mandatory_attributes(self):
        """
        Ensure all mandatory attributes have been set.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def _set_apply_method_variables(self):
        """
        Set variables used in `self._apply(string)`.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def _apply(self, string: str) -> str:
        """
        Apply the defined replacement to a string.
        """
        raise NotImplementedError
