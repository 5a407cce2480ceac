"""
Card model, combinatorics and hand scoring.
"""
