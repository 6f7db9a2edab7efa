from .mixins import (
    AuditableMixin,
    DescribedModelMixin,
    NamedModelMixin,
    TimestampedMixin,
)

__all__ = [
    "TimestampedMixin",
    "NamedModelMixin",
    "DescribedModelMixin",
    "AuditableMixin",
]
