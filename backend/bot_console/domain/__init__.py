"""
DOMAIN LAYER - The Heart of the Console

This layer contains:
- Entities: Bot (owned) and Guild/Channel/Message (remote projections)
- Value Objects: BotId, ConnectionState, ChannelKind, MessageContent
- Ports: BotRepository and the GatewayAdapter/GatewayHandle pair
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, discord.py, Pydantic, etc.)
2. NO I/O operations
3. Only depends on Python stdlib
"""
