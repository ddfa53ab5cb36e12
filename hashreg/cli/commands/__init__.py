"""
Click command implementations for hashreg CLI.

Each module corresponds to a hashreg command (e.g., checksum.py implements
'hashreg sum'). Commands are registered with the main CLI group via the
register_commands() function in hashreg.cli.
"""

from .checksum import checksum
from .info import info
from .listing import listing

COMMANDS = [
    listing,
    info,
    checksum,
]

__all__ = [
    "COMMANDS",
    "checksum",
    "info",
    "listing",
]
