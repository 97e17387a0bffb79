"""
Database Infrastructure
"""
