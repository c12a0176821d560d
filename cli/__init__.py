"""
Stellar ID CLI - Deterministic star-themed identifiers

Commands:
- stellar-id generate / batch - Generate IDs
- stellar-id validate / parse - Check and split existing IDs
- stellar-id stars / star / algorithms - Catalog and algorithm listings
"""

__version__ = "1.0.0"
