"""
Command-line interface for the Image Enhancer
"""
