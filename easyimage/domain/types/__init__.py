"""
Domain models (Settings, TransformSet, TransformDescriptor).
"""
