"""
Raffle booklet generator modules.

This package contains the layout-and-rendering engine for numbered raffle
ticket sheets, plus the services that load configuration and resources and
write the finished pages.
"""

__version__ = "1.0.0"
