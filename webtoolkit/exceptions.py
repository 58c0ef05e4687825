"""
# Web Toolkit: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception classes.
"""


class CommittedMutateException(Exception):
    pass


class InvalidEmailException(Exception):
    _email: str

    def __init__(self, email: str):
        super().__init__(f'error: invalid email address `{email}`')
        self._email = email

    @property
    def email(self) -> str:
        return self._email


class MissingAttributeException(Exception):
    _missing_attribute: str

    def __init__(self, missing_attribute: str):
        super().__init__(f'error: mandatory attribute `{missing_attribute}` not set')
        self._missing_attribute = missing_attribute

    @property
    def missing_attribute(self) -> str:
        return self._missing_attribute


class MissingClientIdException(Exception):
    pass


class UncommittedApplyException(Exception):
    pass
