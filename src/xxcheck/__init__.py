"""xxcheck - verify files against xxHash checksum manifests."""

__version__ = "0.3.0"
