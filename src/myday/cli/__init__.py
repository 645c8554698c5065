"""
Command line interface for MyDay.
"""
