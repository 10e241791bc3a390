"""Creator Watch: collect a creator's asset ids from Helius and register them on a webhook."""

__version__ = "1.0.0"
