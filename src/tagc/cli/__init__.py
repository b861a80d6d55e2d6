"""
Command Line Interface for tagc.
"""
