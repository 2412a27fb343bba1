"""Core gameplay primitives (render events and player decisions).

Kept free of console concerns so both games, the CLI, and tests share them.
"""
