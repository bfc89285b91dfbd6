"""Console management of cable Internet and TV subscriptions sharing one balance."""

__version__ = "0.1.0"
__all__ = ["account", "internet", "tv", "cli"]