"""
Module: session

Purpose:
    Interactive drag/resize lifecycle over one authoritative layout.

Key Classes:
    - GridSession: Event handlers that swap the layout wholesale
    - LayoutChange: Reported when a gesture changes geometry

Used By:
    - Host UI code
"""

from .controller import GridSession, LayoutChange, LayoutListener

__all__ = [
    "GridSession",
    "LayoutChange",
    "LayoutListener",
]
