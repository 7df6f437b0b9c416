"""
GraphQL transport for the plugin operations
"""
