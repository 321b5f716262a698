"""
INFRASTRUCTURE LAYER - Concrete implementations of domain ports

- persistence/: BotRepository implementations
"""
