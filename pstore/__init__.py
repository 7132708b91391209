"""
pstore - list, create and delete AWS SSM Parameter Store parameters.
"""

__version__ = "0.0.1"
