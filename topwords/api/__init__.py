"""
HTTP API over the ranking pipeline.
"""
