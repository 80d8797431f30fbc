"""
Example data classes and their factories, used across the test suite.
"""
