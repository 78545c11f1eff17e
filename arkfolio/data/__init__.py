"""
Data layer - SQLAlchemy models, repositories and JSON seeding.
"""
