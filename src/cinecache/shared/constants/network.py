"""
Network Configuration Constants

Defaults for the TMDB client and the connectivity probe.
"""


class TMDBDefaults:
    """TMDB API defaults."""

    BASE_URL = "https://api.themoviedb.org/3"
    LANGUAGE = "en-US"
    TIMEOUT = 10.0  # seconds, whole request
    USER_AGENT = "CineCache/0.1.0"
    ACCEPT_JSON = "application/json"


class ConnectivityDefaults:
    """Connectivity probe defaults."""

    # Public anycast DNS resolver, reachable on TCP 53 from most networks
    PROBE_HOST = "1.1.1.1"
    PROBE_PORT = 53
    PROBE_TIMEOUT = 1.5  # seconds
