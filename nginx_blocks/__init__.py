"""
nginx-blocks: parser for nginx-like directive configuration files.
"""

from .const import APP_VERSION

__version__ = APP_VERSION
