"""
db/ - Database Layer
====================
Opens the PostgreSQL connection and creates the `users` schema.
Depends only on `config` for connection settings and `utils.logger` for logging.
"""
