"""Routing — ordered route tables with prefix delegation.

Tables are built from static configuration at startup and are immutable
afterwards; resolution and reverse lookup never mutate them.
"""
