"""Fathom error types."""


class FathomError(Exception):
    """Base error for all fathom failures."""


class FathomConfigError(FathomError, ValueError):
    """Engine configuration is malformed."""


class FathomVersionError(FathomError):
    """Language pack manifest version mismatch."""


class FathomChecksumError(FathomError):
    """Language pack file checksum verification failed."""
