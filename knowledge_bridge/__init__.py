"""
Knowledge Bridge.

External knowledge API service backed by Amazon Bedrock Knowledge Bases.
"""

__version__ = "0.1.0"
