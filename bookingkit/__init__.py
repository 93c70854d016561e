"""Bus seat allocation, cinema reservations, a lending library, and account, cart, user-storage and strategy components."""

__version__ = "0.1.0"