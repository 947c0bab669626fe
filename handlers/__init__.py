"""
handlers/ - Presentation Layer
================================
Telegram update handlers. The router classifies each inbound update,
dispatches it to a command, free-text or button handler, and sends the
response back through the Telegram client.
"""
