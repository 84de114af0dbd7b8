"""
Endpoint modules.

Each module defines an ``APIRouter`` for one concern (greeting, users,
exercise logs).  They are combined in ``api/router.py``.
"""
