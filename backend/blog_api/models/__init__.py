"""ORM Models — SQLAlchemy declarative models for both entity collections.

Invariants:
    - All models inherit from Base (db/base.py)
    - User and Blog are independent tables (no foreign keys between them)

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is populated before create_all runs
"""

from blog_api.models.user import User  # noqa: F401
from blog_api.models.blog import Blog  # noqa: F401
