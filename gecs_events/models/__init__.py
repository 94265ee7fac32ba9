# GECS Event Dump — Database Models
# Import all models here for SQLAlchemy discovery

from gecs_events.models.gecs_event import GecsEvent   # noqa
