"""
Core configuration, constants, shared clients and exceptions
"""
