"""SkyCalc command-line interface."""

from skycalc import __version__


__all__ = ["__version__"]
