"""Decision processing helpers.

Centralizes validation so console players and scripted providers flow through the
same pipeline and show up consistently in logs.
"""
