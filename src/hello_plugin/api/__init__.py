"""
HTTP API for the plugin
"""
