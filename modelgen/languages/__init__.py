"""
Target-language specific model generation.

Only Go is implemented.
"""
