"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models


class StoredMirror(models.Model):
    """Persistence model for a serialized event collection.

    Each row is one mirror slot: a key and the whole collection as JSON text.
    Rows are overwritten wholesale, never patched.
    """

    key = models.CharField(max_length=100, primary_key=True)
    payload = models.TextField()
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["key"]

    def __str__(self) -> str:
        return self.key
