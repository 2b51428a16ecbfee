"""Order domain, application and infrastructure layers."""

__version__ = "1.0.0"
