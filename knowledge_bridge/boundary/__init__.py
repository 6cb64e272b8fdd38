"""
Boundary layer for external system integrations.

Wraps vendor SDK calls (Amazon Bedrock) behind clients that raise the
application's own exceptions.
"""
