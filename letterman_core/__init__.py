"""
Letterman core — morph search services and the platform around them.
"""
