from app.domain.enums import ErrorKind

class NetWorthError(Exception):
    """Base class for failures of a net worth update or leaderboard query."""
    kind: ErrorKind

class InputError(NetWorthError):
    """Malformed or missing address, rejected before any external call."""
    kind = ErrorKind.INPUT

class OracleError(NetWorthError):
    """Balance lookup failed. Callers may retry."""
    kind = ErrorKind.ORACLE

class StoreError(NetWorthError):
    kind = ErrorKind.STORE

class RecordExistsError(StoreError):
    """A record for the address was inserted concurrently."""

class CacheError(NetWorthError):
    kind = ErrorKind.CACHE
