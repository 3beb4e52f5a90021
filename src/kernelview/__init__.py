"""kernelview - concurrent host fact collector."""

__version__ = "0.1.0"
