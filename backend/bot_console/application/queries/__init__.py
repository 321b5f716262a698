"""
QUERIES - Read operations (CQRS)

Queries retrieve data without modifying state. Each query has:
- Query class: Parameters for the read
- Handler class: Executes the read

Subfolders:
- bots/     → list_bots
- guilds/   → list_guilds, list_channels
- messages/ → list_messages
- console/  → run_console_command (local introspection)
"""
