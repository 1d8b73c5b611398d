"""
Sportsfeed - live and upcoming sports events from multiple providers
"""

from sportsfeed.config import VERSION

__version__ = VERSION
