"""Exception types raised by the theming layer."""


class ThemeError(ValueError):
    """
    Invalid theme content or lookup.

    Raised for unknown element keys, values of the wrong kind for a key,
    merges between incompatible elements and unknown preset names.
    """
