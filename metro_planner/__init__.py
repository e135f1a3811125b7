"""Metro journey routing and fare engine"""

__version__ = "1.0.0"
