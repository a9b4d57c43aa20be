"""
CineCache - Offline-first movie catalog

Fetches trending movies from TMDB, keeps the latest list in a local
SQLite store and serves reads from that store when the network is
unavailable or the remote call fails.
"""

__version__ = "0.1.0"
__author__ = "CineCache Team"
