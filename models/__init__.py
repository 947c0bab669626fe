"""
models/ - Domain Models
=======================
Plain dataclasses describing inbound updates, menu screens and the
per-process bot context. No Telegram calls are made from here.
"""
