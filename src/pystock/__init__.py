from . import version

__version__ = version.VERSION
