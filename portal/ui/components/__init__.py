"""Reusable UI components.

Layout frame, badges, tables, dialogs and the cards and forms shared by the
customer and admin pages.
"""
