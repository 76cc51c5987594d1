"""
Utility helpers for the league stats engine
"""
