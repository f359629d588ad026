"""
Infrastructure Layer

Contains the implementations that touch the outside world:
- Database engine, sessions and table models
- SQLAlchemy repository implementations
- Configuration management
- Logging infrastructure
"""
