"""
services/ - Service Layer
=========================
Word shuffling, static menu screens, and the thin wrapper around the
Telegram Bot API client used for every outbound call.
"""
