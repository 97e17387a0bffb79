"""
Domain Layer

Contains the room entity, the filter grammar and the repository contract.
Nothing here depends on the application or infrastructure layers.
"""
