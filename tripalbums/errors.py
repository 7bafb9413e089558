"""Domain errors raised by the service layer.

The API layer maps these onto HTTP status codes; services never raise
HTTPException themselves.
"""


class TripAlbumsError(Exception):
    """Base class for TripAlbums service errors."""


class NotFoundError(TripAlbumsError, LookupError):
    """The trip does not exist or does not belong to the requesting user."""


class InvalidRequestError(TripAlbumsError, ValueError):
    """The request references data it is not allowed to touch."""


class ConflictError(TripAlbumsError, ValueError):
    """The resource already exists."""


class AuthenticationError(TripAlbumsError):
    """Credentials were rejected."""
