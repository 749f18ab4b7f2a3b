"""passctl — loyalty pass draft editor for Apple and Google wallets."""

__version__ = "0.1.0"
