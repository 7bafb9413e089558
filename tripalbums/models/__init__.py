"""TripAlbums Database Models."""

from tripalbums.models.user import User
from tripalbums.models.trip import Trip
from tripalbums.models.photo import Photo
from tripalbums.models.album import Album, PhotoAlbum

__all__ = [
    "User",
    "Trip",
    "Photo",
    "Album",
    "PhotoAlbum",
]
