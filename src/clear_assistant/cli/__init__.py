"""
Command-Line Interface Package

Entry point: ``clear-assist`` (see ``main.main``).
"""
