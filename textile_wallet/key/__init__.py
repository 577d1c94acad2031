"""
Key encoding
"""
