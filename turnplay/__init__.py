"""Two console games (Blackjack and Monster Hunter) on a shared turn-based engine."""

__version__ = "0.1.0"
