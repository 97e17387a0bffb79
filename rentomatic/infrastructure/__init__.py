"""
Infrastructure Layer

Contains all external dependencies and implementations:
- Repository implementations (in-memory and SQLAlchemy)
- Database models and session management
- Configuration management
- Logging infrastructure
- Dependency container
"""
