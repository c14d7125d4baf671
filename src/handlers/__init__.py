"""
Lambda entry points. Each module exposes ``handler(event, context)`` and
delegates to logicon/.
"""
