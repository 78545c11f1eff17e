"""
Infrastructure layer - configuration, HTTP client, storage, timers and the
document model.
"""
