"""
Application layer - carousel engine, theme pipeline and read services.
"""
