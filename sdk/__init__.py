from .client import FlagsClient, FlagsClientError

__all__ = ["FlagsClient", "FlagsClientError"]
