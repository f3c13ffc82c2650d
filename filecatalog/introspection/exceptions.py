class IntrospectionError(Exception):
    """Base exception for all byte-level introspection errors."""


class DecodeAnomaly(IntrospectionError):
    """Raised when a decoder meets malformed or truncated bytes."""


class OutOfRangeError(DecodeAnomaly):
    """Raised when a read would fall outside the buffer."""
