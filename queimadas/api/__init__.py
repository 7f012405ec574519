"""
Queimadas - HTTP API
"""
