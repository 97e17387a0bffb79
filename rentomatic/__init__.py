"""
Rentomatic

Room listing service built around validated requests, typed responses
and a small filter language evaluated by repositories.
"""

__version__ = "1.0.0"
