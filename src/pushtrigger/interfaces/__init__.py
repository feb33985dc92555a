"""
Interfaces Layer

Entry points driving the callback domain.
"""
