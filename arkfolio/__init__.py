"""
Arkfolio - portfolio carousel engine and theme pipeline with its content API.
"""

__version__ = "1.0.0"
