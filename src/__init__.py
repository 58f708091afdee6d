"""
Initializes the 'src' directory as a Python package.

This file allows the 'wearpair' package within 'src' to be imported by
scripts in the project's root directory, such as 'main.py', without
installing the project first.
"""
