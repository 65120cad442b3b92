"""
Repository pattern implementation.
Services go through these instead of touching model managers directly,
so locking reads (get_for_update) live in one place.
"""
from typing import Generic, TypeVar, Optional, List
from django.db.models import QuerySet, Model
from django.db import transaction

T = TypeVar('T', bound=Model)


class BaseRepository(Generic[T]):
    """CRUD helpers shared by the inventory and ledger repositories"""

    def __init__(self, model: type[T]):
        self.model = model

    def get_by_id(self, id: int, **filters) -> Optional[T]:
        return self.model.objects.filter(id=id, **filters).first()

    def get_for_update(self, id: int, **filters) -> Optional[T]:
        """
        Fetch by ID holding a row lock until the surrounding transaction
        ends. Must be called inside transaction.atomic(); on SQLite the
        lock is a no-op and the in-process locks do the serializing.
        """
        return self.model.objects.select_for_update().filter(id=id, **filters).first()

    def get_all(self, **filters) -> QuerySet[T]:
        return self.model.objects.filter(**filters)

    def create(self, **fields) -> T:
        return self.model.objects.create(**fields)

    def update(self, instance: T, **changes) -> T:
        """Apply changes and save only the touched columns (plus updated_at when present)"""
        for key, value in changes.items():
            setattr(instance, key, value)
        update_fields = list(changes)
        if update_fields and any(field.name == 'updated_at' for field in self.model._meta.concrete_fields):
            update_fields.append('updated_at')
        instance.save(update_fields=update_fields or None)
        return instance

    def delete(self, instance: T) -> None:
        instance.delete()

    def exists(self, **filters) -> bool:
        return self.model.objects.filter(**filters).exists()

    def count(self, **filters) -> int:
        return self.model.objects.filter(**filters).count()

    @transaction.atomic
    def bulk_create(self, instances: List[T]) -> List[T]:
        return self.model.objects.bulk_create(instances)
