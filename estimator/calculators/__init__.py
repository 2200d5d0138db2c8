"""
Deterministic calculation engine.

Pure Python math. Given a validated job for one part type, produce the
ordered yield/weight results for the estimate sheet.
"""
