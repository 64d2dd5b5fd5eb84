"""
Shared repository plumbing
"""
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from shop_analytics.exceptions import ReferentialIntegrityError
from shop_analytics.logger import get_logger

log = get_logger(__name__)


class BaseRepository:
    """Holds the session and commits with integrity errors translated"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def _commit(self):
        """
        Commit the current unit of work
        
        Raises:
            ReferentialIntegrityError: If the database rejected a constraint;
                the session is rolled back first
        """
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            log.warning("Integrity violation, transaction rolled back: %s", e.orig)
            raise ReferentialIntegrityError(str(e.orig)) from e
