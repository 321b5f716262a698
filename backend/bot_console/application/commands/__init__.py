"""
COMMANDS - Write operations (CQRS)

Subfolders:
- bots/     → create_bot, delete_bot, connect_bot, disconnect_bot
- messages/ → send_message
"""
