"""
Presentation Layer

Transport adapters that build requests from external input and map
responses back to transport payloads.
"""
