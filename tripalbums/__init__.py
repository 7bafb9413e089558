"""TripAlbums - photo album suggestions for trips."""

__version__ = "0.1.0"
