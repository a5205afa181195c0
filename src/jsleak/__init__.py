"""jsleak: find leaked credentials in retrieved JavaScript resources."""

__version__ = "0.3.0"
