"""cp-common — typed-constant classifications and supporting configuration."""

__version__ = "0.1.0"
