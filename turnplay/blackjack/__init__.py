"""Single-round Blackjack against a dealer."""
