"""Command-line interface adapters.

Lets an operator run a tool by name with JSON arguments, the same way
the agent runtime would call it.
"""
