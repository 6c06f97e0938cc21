"""Sentinel for values that are absent from the input.

``None`` already plays the role of an explicit null, so a second singleton
is needed to tell "the key is missing" apart from "the key is null".
Object schemas look up missing keys as :data:`UNDEFINED`, and only
``optional()`` schemas accept it.
"""

from __future__ import annotations


class _Undefined:
    """Singleton type of :data:`UNDEFINED`."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Undefined:
        return self

    def __deepcopy__(self, memo: dict) -> _Undefined:
        return self

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()
