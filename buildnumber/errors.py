"""
Copyright 2026 Adobe
All Rights Reserved.

NOTICE: Adobe permits you to use, modify, and distribute this file in accordance
with the terms of the Adobe license agreement accompanying it.
"""


class BuildNumberError(Exception):
    """Base BuildNumber Exception"""
    pass


class BuildNumberUsageError(BuildNumberError):
    """Error indicating the command line arguments could not be parsed"""
    pass


class BuildNumberHelpRequested(BuildNumberUsageError):
    """Raised when the usage text was requested instead of a run"""
    pass


class BuildNumberConfigurationError(BuildNumberError):
    """Error indicating an issue with the output path or the output type"""
    pass


class BuildNumberPersistenceError(BuildNumberError):
    """Error indicating the counter file could not be read or written"""
    pass


class BuildNumberEmissionError(BuildNumberError):
    """Error indicating the generated source file could not be written"""
    pass
