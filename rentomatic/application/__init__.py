"""
Application Layer

Contains the application's use cases together with the request and
response objects that form their boundary. This layer orchestrates the
flow of data to and from the entities.
"""
