"""Podwords error types."""


class PodwordsError(Exception):
    """Base error for all podwords failures."""


class PodwordsVersionError(PodwordsError):
    """Manifest version mismatch."""


class PodwordsChecksumError(PodwordsError):
    """Seed file checksum verification failed."""
