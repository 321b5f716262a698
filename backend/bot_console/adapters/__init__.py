"""
Platform Adapters Module
========================

Adapters implement the domain gateway port on top of a concrete chat
platform client library. The application layer never imports them
directly; the DI container picks one at startup.

Available Adapters:
- discord: discord.py gateway adapter (see adapters/discord/)
"""
