"""
Tools the food info agent can call.
"""
