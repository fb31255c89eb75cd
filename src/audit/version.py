"""Product name and version reported in the `User-Agent` header."""

PRODUCT = "GABI"

__version__ = "0.1.0"


def user_agent() -> str:
    """Return the `User-Agent` value, e.g. `GABI/0.1.0`."""
    return f"{PRODUCT}/{__version__}"
