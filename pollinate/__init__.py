"""
Seed-file generation from live database tables.

Reads each table page by page through SQLAlchemy and writes one self-contained
Python seeder module per table:
- table discovery and denylist filtering
- paginated row export
- overwrite-safe file writing
"""

__version__ = "0.1.0"
