"""
Error types for classforge.

Class generation itself never raises. These errors are reserved for
configuration time: loading theme files and building themes from
untrusted data.
"""


class ClassforgeError(Exception):
    """Base exception for all classforge errors."""

    pass


class ThemeError(ClassforgeError):
    """
    Raised when a theme cannot be built or loaded.

    Examples:
    - Theme file contains invalid YAML
    - Theme file does not match the theme schema
    - Palette override names a color that does not exist
    - Unknown preset requested in strict mode
    """

    pass
