# sponsor_service/db/base_class.py

from sqlalchemy.orm import declarative_base

# The single declarative base shared by every model in the service.
Base = declarative_base()
