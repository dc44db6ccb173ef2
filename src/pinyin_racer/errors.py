"""Exception types raised by the game core."""


class PinyinRacerError(Exception):
    """Base class for game errors."""


class InvalidArgument(PinyinRacerError, ValueError):
    """Bad level, seconds or answer payload supplied by a caller."""


class PersistenceCorrupt(PinyinRacerError):
    """The persisted progress document cannot be decoded or validated."""
