"""
Shared module for cross-cutting infrastructure used by the REST API.

STRUCTURE:
- shared.config: Configuration
  - settings.py: Environment config (pydantic-settings)
  - logging.py: Structured logging
  - constants.py: Enumerations and limits

- shared.infrastructure: Database and request plumbing
  - db.py: SQLAlchemy engine, sessions, safe_commit()
  - correlation.py: X-Request-ID middleware and logging filter

- shared.utils: Utilities
  - exceptions.py: HTTP exceptions with auto-logging

IMPORT EXAMPLES:
    from shared.infrastructure.db import get_db, safe_commit
    from shared.config.settings import settings
    from shared.config.constants import FinanceType, Limits
    from shared.utils.exceptions import NotFoundError, ValidationError
"""
