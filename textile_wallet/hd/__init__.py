"""
HD key derivation
"""
