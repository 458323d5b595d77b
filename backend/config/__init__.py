"""
Application configuration read from the environment.
"""
