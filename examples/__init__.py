"""
Example agents served by the food info endpoint.
"""
